# storefront/clients/http_client.py

"""HTTP implementation of the product client on curl_cffi's async session."""

import json
import logging
from typing import Any
from urllib.parse import quote

from curl_cffi import requests as curl_requests

from storefront.clients.base_client import ApiResponse, ProductApiClient
from storefront.config.settings import Settings
from storefront.models.product import Product


class HttpProductApiClient(ProductApiClient):
    """Talks to the storefront backend over HTTP.

    One ``AsyncSession`` is shared by all calls. Non-2xx responses are
    returned with an empty body; transport and JSON faults propagate.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        session: Any = None,
    ) -> None:
        self.logger = logging.getLogger("storefront.client")
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")
        self._request_timeout: int = (
            timeout if timeout is not None else self.settings.REQUEST_TIMEOUT
        )
        # An injected session stays owned by the caller
        self._owns_session = session is None
        self.session = session or curl_requests.AsyncSession(
            headers=self.settings.DEFAULT_HEADERS,
        )

    async def __aenter__(self) -> "HttpProductApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the session if this client created it."""
        if self._owns_session:
            await self.session.close()

    def _url(self, endpoint: str, **params: Any) -> str:
        """Build an absolute URL for a named endpoint."""
        path = self.settings.ENDPOINTS[endpoint].format(**params)
        return f"{self.base_url}{path}"

    async def _get(self, url: str) -> tuple[int, str]:
        """GET *url* and return ``(status_code, text)``."""
        self.logger.debug("GET %s", url)
        resp = await self.session.get(
            url,
            headers=self.settings.DEFAULT_HEADERS,
            timeout=self._request_timeout,
        )
        if not 200 <= resp.status_code < 300:
            self.logger.warning(
                "HTTP %d for %s", resp.status_code, url,
            )
            return resp.status_code, ""
        return resp.status_code, resp.text

    @staticmethod
    def _decode(text: str) -> Any:
        """Decode a JSON body; empty text and ``null`` both mean no body."""
        if not text.strip():
            return None
        return json.loads(text)

    @staticmethod
    def _as_list(data: Any, what: str) -> list[Any]:
        if not isinstance(data, list):
            msg = f"Expected a JSON array of {what}, got {type(data).__name__}"
            raise ValueError(msg)
        return data

    async def _fetch_products(self, url: str) -> ApiResponse[list[Product]]:
        status, text = await self._get(url)
        data = self._decode(text)
        if data is None:
            return ApiResponse(status)
        items = self._as_list(data, "products")
        return ApiResponse(
            status, [Product.from_dict(item) for item in items],
        )

    async def get_all_products(self) -> ApiResponse[list[Product]]:
        """Fetch every product in the catalogue."""
        return await self._fetch_products(self._url("products"))

    async def get_product_by_id(
        self, product_id: int,
    ) -> ApiResponse[Product]:
        """Fetch a single product."""
        status, text = await self._get(
            self._url("product", product_id=product_id)
        )
        data = self._decode(text)
        if data is None:
            return ApiResponse(status)
        return ApiResponse(status, Product.from_dict(data))

    async def get_image_urls(
        self, product_id: int,
    ) -> ApiResponse[list[str]]:
        """Fetch all image URLs of a product."""
        status, text = await self._get(
            self._url("image_urls", product_id=product_id)
        )
        data = self._decode(text)
        if data is None:
            return ApiResponse(status)
        urls = self._as_list(data, "image urls")
        if not all(isinstance(u, str) for u in urls):
            raise ValueError("Image url array contains non-string entries")
        return ApiResponse(status, urls)

    async def get_image_url(self, product_id: int) -> ApiResponse[str]:
        """Fetch the primary image URL of a product.

        The backend may answer with a JSON string or with the bare URL;
        any other JSON value is a decode fault.
        """
        status, text = await self._get(
            self._url("image_url", product_id=product_id)
        )
        body = text.strip()
        if not body or body == "null":
            return ApiResponse(status)
        if body.startswith(("{", "[")):
            raise ValueError("Expected an image url, got a JSON structure")
        if body.startswith('"'):
            data = json.loads(body)
        else:
            try:
                data = json.loads(body)
            except ValueError:
                return ApiResponse(status, body)
        if not isinstance(data, str):
            msg = f"Expected an image url, got {type(data).__name__}"
            raise ValueError(msg)
        return ApiResponse(status, data)

    async def get_products_by_category(
        self, category: str,
    ) -> ApiResponse[list[Product]]:
        """Fetch the products of one category."""
        return await self._fetch_products(
            self._url("category", category=quote(category, safe=""))
        )
