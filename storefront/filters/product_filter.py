# storefront/filters/product_filter.py

"""Client-side product filtering by name."""

import logging

from storefront.models.product import Product

logger = logging.getLogger("storefront.filters")


class ProductFilter:
    """Filter fetched products by a free-text search term."""

    @staticmethod
    def filter_by_name(
        products: list[Product],
        text: str,
    ) -> list[Product]:
        """Keep products whose name contains *text*, ignoring case.

        Surrounding whitespace in *text* is ignored; a blank term keeps
        every product.
        """
        term = text.strip().lower()
        if not term:
            return products

        kept = [p for p in products if term in p.name.lower()]

        logger.debug(
            "Name filter '%s' kept %d of %d products",
            term,
            len(kept),
            len(products),
        )
        return kept
