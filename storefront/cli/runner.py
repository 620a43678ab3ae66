# storefront/cli/runner.py

"""Headless CLI runner on top of the repository and catalog service."""

import json
import logging
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from storefront.clients.base_client import ProductApiClient
from storefront.clients.http_client import HttpProductApiClient
from storefront.models.product import Product
from storefront.models.result import Error, Result
from storefront.repository.product_repository import ProductRepository
from storefront.services.catalog_service import CatalogService, CatalogState
from storefront.services.health_checker import HealthChecker

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)

COMMANDS: tuple[str, ...] = (
    "products", "product", "images", "image", "category", "health",
)
# Commands whose argument is a product id
_ID_COMMANDS = frozenset({"product", "images", "image"})


def parse_product_id(raw: str | None) -> int:
    """Validate a product id argument; raises ``SystemExit`` if invalid."""
    try:
        product_id = int(raw or "")
    except ValueError:
        product_id = 0
    if product_id <= 0:
        _err.print(f"[red]Invalid product id: {raw!r}[/red]")
        raise SystemExit(1)
    return product_id


def _format_price(p: Product) -> str:
    return f"{p.price:,.2f}" if p.price is not None else "N/A"


def _print_products_table(products: list[Product], title: str) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title=title,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", justify="right")
    table.add_column("Name", max_width=50)
    table.add_column("Brand", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Category")
    table.add_column("Images", justify="right", style="dim")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            str(p.id),
            p.name[:50] or "—",
            p.brand or "—",
            _format_price(p),
            p.category or "—",
            str(len(p.image_urls)),
        )

    Console().print(table)


def _print_urls_table(urls: list[str], title: str) -> None:
    table = Table(title=title, title_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("URL", overflow="fold")
    for idx, url in enumerate(urls, 1):
        table.add_row(str(idx), url)
    Console().print(table)


def _emit_json(data: Any) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def _report_error(error: Error) -> int:
    code = f" (HTTP {error.code})" if error.code is not None else ""
    _err.print(f"[red]Error: {error.message}{code}[/red]")
    return 1


def _output_listing(
    state: CatalogState,
    search_text: str | None,
    output_format: str,
    title: str,
) -> int:
    if state.error_message is not None:
        _err.print(f"[red]Error: {state.error_message}[/red]")
        return 1

    products = state.products
    if search_text:
        products = CatalogService.search(products, search_text)
        _err.print(
            f"[dim]{len(products)} of {len(state.products)} match "
            f"'{search_text.strip()}'[/dim]"
        )

    if output_format == "table":
        _print_products_table(products, title)
    else:
        _emit_json([p.to_dict() for p in products])
    return 0


def _output_urls(result: Result[Any], output_format: str, title: str) -> int:
    if isinstance(result, Error):
        return _report_error(result)
    value = result.value
    urls = value if isinstance(value, list) else [value]
    if output_format == "table":
        _print_urls_table(urls, title)
    else:
        _emit_json(value)
    return 0


async def _run_health(repository: ProductRepository) -> int:
    _err.print("[bold]Running backend health check...[/bold]")
    r = await HealthChecker(repository).check()

    if r.status == "ok":
        status = "[green]✅ OK[/green]"
    elif r.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    table = Table(
        title="Backend Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")
    table.add_row(status, f"{r.latency_ms:.0f}ms", r.message)
    Console().print(table)
    return 1 if r.status == "down" else 0


async def execute(
    client: ProductApiClient,
    command: str,
    argument: str | None = None,
    output_format: str = "json",
    search_text: str | None = None,
) -> int:
    """Run one command against *client* and return an exit code."""
    repository = ProductRepository(client)
    catalog = CatalogService(repository)

    if command == "health":
        return await _run_health(repository)

    if command == "products":
        state = await catalog.load_home()
        return _output_listing(
            state, search_text, output_format, "Products",
        )

    if command == "category":
        if not argument:
            _err.print("[red]A category name is required.[/red]")
            return 1
        state = await catalog.load_category(argument)
        return _output_listing(
            state, search_text, output_format, f"Category: {argument}",
        )

    if command not in _ID_COMMANDS:
        _err.print(f"[red]Unknown command: {command}[/red]")
        _err.print(f"[dim]Available: {', '.join(COMMANDS)}[/dim]")
        return 1

    product_id = parse_product_id(argument)

    if command == "images":
        return _output_urls(
            await repository.get_image_urls(product_id),
            output_format,
            f"Images of product {product_id}",
        )

    if command == "image":
        return _output_urls(
            await repository.get_image_url(product_id),
            output_format,
            f"Image of product {product_id}",
        )

    result = await repository.get_product_by_id(product_id)
    if isinstance(result, Error):
        return _report_error(result)
    product = result.value
    if output_format == "table":
        _print_products_table([product], f"Product {product_id}")
        _print_urls_table(list(product.image_urls), "Images")
    else:
        _emit_json(product.to_dict())
    return 0


async def cli_run(
    command: str,
    argument: str | None,
    output_format: str,
    base_url: str | None,
    search_text: str | None,
) -> int:
    """Open an HTTP client, run *command* and close the client."""
    async with HttpProductApiClient(base_url=base_url) as client:
        _err.print(
            f"[bold]{command}[/bold] [dim]backend={client.base_url}[/dim]"
        )
        logger.info(
            "Running '%s' (%s) against %s",
            command,
            argument,
            client.base_url,
        )
        return await execute(
            client, command, argument, output_format, search_text,
        )
