# storefront/models/product.py

"""Product data model as returned by the storefront backend."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any


@dataclass(frozen=True)
class Product:
    """A single catalogue product. Only ``id`` is server-guaranteed."""

    id: int
    name: str = ""
    brand: str = ""
    price: Decimal | None = None
    category: str = ""
    image_urls: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Product":
        """Build a Product from a decoded JSON object.

        Accepts both ``imageUrls`` (backend casing) and ``image_urls``.
        Raises ``ValueError`` when the payload cannot be converted
        without guessing.
        """
        if not isinstance(data, dict):
            msg = f"Expected a product object, got {type(data).__name__}"
            raise ValueError(msg)
        if data.get("id") is None:
            raise ValueError("Product payload has no id")

        product_id = _parse_id(data["id"])

        raw_price = data.get("price")
        price: Decimal | None = None
        if raw_price is not None:
            if isinstance(raw_price, bool) or not isinstance(
                raw_price, (int, float, str)
            ):
                msg = f"Invalid price for product {product_id}: {raw_price!r}"
                raise ValueError(msg)
            try:
                # via str so 19.99 does not pick up float noise
                price = Decimal(str(raw_price))
            except InvalidOperation as exc:
                msg = f"Invalid price for product {product_id}: {raw_price!r}"
                raise ValueError(msg) from exc
            if not price.is_finite():
                msg = f"Invalid price for product {product_id}: {raw_price!r}"
                raise ValueError(msg)

        raw_urls = data.get("imageUrls", data.get("image_urls")) or []
        if not isinstance(raw_urls, list) or not all(
            isinstance(u, str) for u in raw_urls
        ):
            msg = f"Invalid image urls for product {product_id}"
            raise ValueError(msg)

        return cls(
            id=product_id,
            name=_parse_text(data, "name"),
            brand=_parse_text(data, "brand"),
            price=price,
            category=_parse_text(data, "category"),
            image_urls=tuple(raw_urls),
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-safe dict using the backend's key names."""
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "price": str(self.price) if self.price is not None else None,
            "category": self.category,
            "imageUrls": list(self.image_urls),
        }


def _parse_id(raw: Any) -> int:
    """Convert a JSON id; bools and fractional numbers are rejected."""
    if isinstance(raw, bool):
        raise ValueError(f"Invalid product id: {raw!r}")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(f"Invalid product id: {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"Invalid product id: {raw!r}") from exc
    raise ValueError(f"Invalid product id: {raw!r}")


def _parse_text(data: dict[str, Any], key: str) -> str:
    """Read an optional text field; null means empty, objects are rejected."""
    raw = data.get(key)
    if raw is None:
        return ""
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise ValueError(f"Invalid {key}: {raw!r}")
    return str(raw)
