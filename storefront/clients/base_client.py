# storefront/clients/base_client.py

"""Contract every product backend client implements."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from storefront.models.product import Product

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Transport-level outcome of one backend call.

    The client reports what the transport saw and nothing more; deciding
    what an unsuccessful or empty response means is the repository's job.
    """

    status_code: int
    body: T | None = None

    @property
    def is_successful(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status_code < 300


class ProductApiClient(ABC):
    """Abstract client for the product endpoints of the backend.

    Implementations may raise on transport or decoding faults and must be
    safe to call concurrently.
    """

    @abstractmethod
    async def get_all_products(self) -> ApiResponse[list[Product]]:
        """Fetch every product in the catalogue."""
        ...

    @abstractmethod
    async def get_product_by_id(
        self, product_id: int,
    ) -> ApiResponse[Product]:
        """Fetch a single product."""
        ...

    @abstractmethod
    async def get_image_urls(
        self, product_id: int,
    ) -> ApiResponse[list[str]]:
        """Fetch all image URLs of a product."""
        ...

    @abstractmethod
    async def get_image_url(self, product_id: int) -> ApiResponse[str]:
        """Fetch the primary image URL of a product."""
        ...

    @abstractmethod
    async def get_products_by_category(
        self, category: str,
    ) -> ApiResponse[list[Product]]:
        """Fetch the products of one category."""
        ...
