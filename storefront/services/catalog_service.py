# storefront/services/catalog_service.py

"""Loads catalogue data into display-ready state objects."""

import asyncio
import logging
from dataclasses import dataclass, field

from storefront.filters.product_filter import ProductFilter
from storefront.models.product import Product
from storefront.models.result import Error, Result, Success
from storefront.repository.product_repository import ProductRepository

logger = logging.getLogger("storefront.catalog")


@dataclass
class CatalogState:
    """Snapshot of a product listing as a screen would render it."""

    is_loading: bool = False
    products: list[Product] = field(default_factory=list)
    error_message: str | None = None


@dataclass(frozen=True)
class ProductDetail:
    """A product together with its full image gallery."""

    product: Product
    image_urls: list[str]


class CatalogService:
    """Builds listing and detail views on top of the repository."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    @staticmethod
    def _to_state(result: Result[list[Product]]) -> CatalogState:
        match result:
            case Success(value=products):
                return CatalogState(products=list(products))
            case Error(message=message):
                return CatalogState(error_message=message)
        return CatalogState(error_message="Unknown error")

    async def load_home(self) -> CatalogState:
        """Load the full catalogue for the home listing."""
        result = await self.repository.get_all_products()
        state = self._to_state(result)
        if state.error_message is not None:
            logger.warning("Home listing failed: %s", state.error_message)
        else:
            logger.info("Home listing loaded %d products", len(state.products))
        return state

    async def load_category(self, category: str) -> CatalogState:
        """Load the listing for one category."""
        result = await self.repository.get_products_by_category(category)
        state = self._to_state(result)
        if state.error_message is not None:
            logger.warning(
                "Category '%s' listing failed: %s",
                category,
                state.error_message,
            )
        return state

    @staticmethod
    def search(products: list[Product], text: str) -> list[Product]:
        """Narrow an already loaded listing by product name."""
        return ProductFilter.filter_by_name(products, text)

    async def load_detail(self, product_id: int) -> Result[ProductDetail]:
        """Fetch a product and its image URLs concurrently.

        The product error is reported first when both calls fail.
        """
        product_result, urls_result = await asyncio.gather(
            self.repository.get_product_by_id(product_id),
            self.repository.get_image_urls(product_id),
        )
        if isinstance(product_result, Error):
            return product_result
        if isinstance(urls_result, Error):
            return urls_result
        return Success(
            ProductDetail(
                product=product_result.value,
                image_urls=list(urls_result.value),
            )
        )
