# main.py

"""Entry point for the storefront command-line client."""

import argparse
import asyncio
import logging
import sys

from storefront.cli.runner import COMMANDS, cli_run
from storefront.config.logging_config import setup_logging
from storefront.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Query the storefront product backend.",
        epilog=f"Default backend: {Settings.API_BASE_URL}",
    )
    parser.add_argument(
        "command",
        choices=COMMANDS,
        help="Operation to run.",
    )
    parser.add_argument(
        "argument",
        nargs="?",
        default=None,
        help="Product id (product, images, image) or category name.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        dest="base_url",
        help="Backend base URL (default: STOREFRONT_API_BASE_URL).",
    )
    parser.add_argument(
        "-s",
        "--search",
        default=None,
        dest="search_text",
        help="Only list products whose name contains this text.",
    )
    return parser


def main() -> None:
    """Parse arguments, run one command and exit with its status."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    try:
        exit_code = asyncio.run(
            cli_run(
                command=args.command,
                argument=args.argument,
                output_format=args.output_format,
                base_url=args.base_url,
                search_text=args.search_text,
            )
        )
    except Exception:
        logger.critical("Fatal error during CLI run", exc_info=True)
        raise
    finally:
        logger.info("storefront shutting down")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
