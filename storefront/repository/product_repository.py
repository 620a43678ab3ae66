# storefront/repository/product_repository.py

"""Repository that turns client outcomes into ``Success``/``Error`` results.

Every operation goes through the same three steps: invoke the client,
capture either its ``ApiResponse`` or the exception it raised, then match
that outcome against the operation's policy. Nothing but cancellation
escapes this boundary.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar, Union

from storefront.clients.base_client import ApiResponse, ProductApiClient
from storefront.models.product import Product
from storefront.models.result import UNKNOWN_ERROR, Error, Result, Success

T = TypeVar("T")

logger = logging.getLogger("storefront.repository")

# Substituted for an empty product body. Looks like a real product, which
# hides backend bugs; kept because existing consumers rely on it.
PLACEHOLDER_PRODUCT_ID = 1

TransportOutcome = Union[ApiResponse[T], Exception]


@dataclass(frozen=True)
class OperationPolicy:
    """Failure message and empty-body default for one operation."""

    failure_message: str
    default: Callable[[], Any]


OPERATION_POLICIES: dict[str, OperationPolicy] = {
    "get_all_products": OperationPolicy(
        "Failed to fetch all products", list,
    ),
    "get_product_by_id": OperationPolicy(
        "Failed to fetch product by id",
        lambda: Product(id=PLACEHOLDER_PRODUCT_ID),
    ),
    "get_image_urls": OperationPolicy(
        "Failed to fetch image urls", list,
    ),
    "get_image_url": OperationPolicy(
        "Failed to fetch image url", str,
    ),
    "get_products_by_category": OperationPolicy(
        "get product failed", list,
    ),
}


async def capture(
    call: Callable[[], Awaitable[ApiResponse[T]]],
) -> TransportOutcome[T]:
    """Await *call*, returning the exception instead of raising it.

    ``asyncio.CancelledError`` is not an ``Exception`` and still propagates.
    """
    try:
        return await call()
    except Exception as exc:
        return exc


def normalize(
    operation: str, outcome: TransportOutcome[T],
) -> Result[T]:
    """Map a captured client outcome to a ``Result`` for *operation*."""
    policy = OPERATION_POLICIES[operation]
    match outcome:
        case Exception() as exc:
            logger.warning(
                "%s raised %s: %s",
                operation,
                type(exc).__name__,
                exc,
                exc_info=exc,
            )
            return Error(str(exc) or UNKNOWN_ERROR)
        case ApiResponse(is_successful=False, status_code=code):
            logger.warning(
                "%s failed with HTTP %d", operation, code,
            )
            return Error(policy.failure_message, code)
        case ApiResponse(body=None):
            default = policy.default()
            if operation == "get_product_by_id":
                logger.warning(
                    "%s returned no body; substituting placeholder "
                    "product id=%d",
                    operation,
                    PLACEHOLDER_PRODUCT_ID,
                )
            else:
                logger.debug(
                    "%s returned no body; using %r", operation, default,
                )
            return Success(default)
        case ApiResponse(body=body):
            return Success(body)
        case _:
            logger.error(
                "%s: client returned %s instead of an ApiResponse",
                operation,
                type(outcome).__name__,
            )
            return Error(UNKNOWN_ERROR)


class ProductRepository:
    """Product data access with uniform error normalization."""

    def __init__(self, client: ProductApiClient) -> None:
        self.client = client

    async def get_all_products(self) -> Result[list[Product]]:
        """Every product, or an empty list when the body is absent."""
        outcome = await capture(self.client.get_all_products)
        return normalize("get_all_products", outcome)

    async def get_product_by_id(self, product_id: int) -> Result[Product]:
        """One product; ``Product(id=1)`` when the body is absent."""
        outcome = await capture(
            lambda: self.client.get_product_by_id(product_id)
        )
        return normalize("get_product_by_id", outcome)

    async def get_image_urls(self, product_id: int) -> Result[list[str]]:
        """All image URLs of a product."""
        outcome = await capture(
            lambda: self.client.get_image_urls(product_id)
        )
        return normalize("get_image_urls", outcome)

    async def get_image_url(self, product_id: int) -> Result[str]:
        """Primary image URL of a product, ``""`` when absent."""
        outcome = await capture(
            lambda: self.client.get_image_url(product_id)
        )
        return normalize("get_image_url", outcome)

    async def get_products_by_category(
        self, category: str,
    ) -> Result[list[Product]]:
        """Products of one category."""
        outcome = await capture(
            lambda: self.client.get_products_by_category(category)
        )
        return normalize("get_products_by_category", outcome)
