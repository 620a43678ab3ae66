# tests/test_runner.py

"""Tests for the headless CLI runner."""

import io
import json
import unittest
from decimal import Decimal
from unittest.mock import AsyncMock, patch

from storefront.cli.runner import execute, parse_product_id
from storefront.clients.base_client import ApiResponse, ProductApiClient
from storefront.models.product import Product

PRODUCTS = [
    Product(id=1, name="Canvas Tote", brand="Fieldwork", price=Decimal("24.50")),
    Product(id=2, name="Leather Wallet", brand="Fieldwork"),
]


def _make_client() -> AsyncMock:
    """Create a client mock honouring the ProductApiClient contract."""
    return AsyncMock(spec=ProductApiClient)


class TestParseProductId(unittest.TestCase):
    """parse_product_id validation."""

    def test_valid_id(self) -> None:
        """Positive integers are accepted."""
        self.assertEqual(parse_product_id("12"), 12)

    def test_invalid_ids_exit(self) -> None:
        """Missing, zero, negative and non-numeric ids exit with 1."""
        for raw in (None, "", "0", "-3", "abc"):
            with self.subTest(raw=raw):
                with self.assertRaises(SystemExit) as cm:
                    parse_product_id(raw)
                self.assertEqual(cm.exception.code, 1)


class TestExecute(unittest.IsolatedAsyncioTestCase):
    """execute() command dispatch and output."""

    async def _run(
        self, client: AsyncMock, *args: str | None, **kwargs: str,
    ) -> tuple[int, str]:
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = await execute(client, *args, **kwargs)  # type: ignore[arg-type]
        return code, out.getvalue()

    async def test_products_json(self) -> None:
        """products prints the listing as JSON."""
        client = _make_client()
        client.get_all_products.return_value = ApiResponse(200, PRODUCTS)
        code, out = await self._run(client, "products")

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual([p["id"] for p in data], [1, 2])
        self.assertEqual(data[0]["price"], "24.50")

    async def test_products_search(self) -> None:
        """--search narrows the listing by name."""
        client = _make_client()
        client.get_all_products.return_value = ApiResponse(200, PRODUCTS)
        code, out = await self._run(
            client, "products", search_text="wallet",
        )
        self.assertEqual(code, 0)
        self.assertEqual([p["id"] for p in json.loads(out)], [2])

    async def test_products_table(self) -> None:
        """Table output renders product names."""
        client = _make_client()
        client.get_all_products.return_value = ApiResponse(200, PRODUCTS)
        code, out = await self._run(client, "products", output_format="table")

        self.assertEqual(code, 0)
        self.assertIn("Canvas", out)

    async def test_products_error_exit_code(self) -> None:
        """A failed listing exits with 1 and prints nothing to stdout."""
        client = _make_client()
        client.get_all_products.return_value = ApiResponse(500)
        code, out = await self._run(client, "products")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    async def test_category(self) -> None:
        """category passes its argument through."""
        client = _make_client()
        client.get_products_by_category.return_value = ApiResponse(
            200, PRODUCTS[:1]
        )
        code, out = await self._run(client, "category", "bags")

        self.assertEqual(code, 0)
        client.get_products_by_category.assert_awaited_once_with("bags")
        self.assertEqual(len(json.loads(out)), 1)

    async def test_category_requires_name(self) -> None:
        """category without a name fails."""
        code, _ = await self._run(_make_client(), "category")
        self.assertEqual(code, 1)

    async def test_product_detail(self) -> None:
        """product prints the product with its own image URLs."""
        client = _make_client()
        client.get_product_by_id.return_value = ApiResponse(
            200, Product(id=1, name="Canvas Tote", image_urls=("a.jpg",))
        )
        code, out = await self._run(client, "product", "1")

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["id"], 1)
        self.assertEqual(data["imageUrls"], ["a.jpg"])
        client.get_image_urls.assert_not_awaited()

    async def test_product_ignores_failing_gallery(self) -> None:
        """A failing images endpoint does not fail the product command."""
        client = _make_client()
        client.get_product_by_id.return_value = ApiResponse(200, PRODUCTS[0])
        client.get_image_urls.return_value = ApiResponse(500)
        code, out = await self._run(client, "product", "1")

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["name"], "Canvas Tote")

    async def test_product_not_found(self) -> None:
        """A 404 product exits with 1."""
        client = _make_client()
        client.get_product_by_id.return_value = ApiResponse(404)
        client.get_image_urls.return_value = ApiResponse(404)
        code, _ = await self._run(client, "product", "99")
        self.assertEqual(code, 1)

    async def test_images(self) -> None:
        """images prints the URL list."""
        client = _make_client()
        client.get_image_urls.return_value = ApiResponse(200, ["a.jpg", "b.jpg"])
        code, out = await self._run(client, "images", "1")

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), ["a.jpg", "b.jpg"])

    async def test_image_empty_body(self) -> None:
        """image with no body prints an empty string."""
        client = _make_client()
        client.get_image_url.return_value = ApiResponse(200)
        code, out = await self._run(client, "image", "1")

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), "")

    async def test_image_transport_error(self) -> None:
        """A raising client maps to exit code 1."""
        client = _make_client()
        client.get_image_url.side_effect = ConnectionError("refused")
        code, _ = await self._run(client, "image", "1")
        self.assertEqual(code, 1)

    async def test_unknown_command(self) -> None:
        """Unknown commands fail."""
        code, _ = await self._run(_make_client(), "orders")
        self.assertEqual(code, 1)

    async def test_health_ok(self) -> None:
        """health exits 0 when the backend answers."""
        client = _make_client()
        client.get_all_products.return_value = ApiResponse(200, PRODUCTS)
        code, out = await self._run(client, "health")

        self.assertEqual(code, 0)
        self.assertIn("OK", out)

    async def test_health_down(self) -> None:
        """health exits 1 when the backend fails."""
        client = _make_client()
        client.get_all_products.return_value = ApiResponse(503)
        code, _ = await self._run(client, "health")
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
