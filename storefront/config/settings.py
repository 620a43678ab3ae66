# storefront/config/settings.py

"""Central configuration for the storefront data layer."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront data layer."""

    # --- Backend ---
    API_BASE_URL: str = os.getenv(
        "STOREFRONT_API_BASE_URL", "http://localhost:8080"
    ).rstrip("/")
    REQUEST_TIMEOUT: int = int(
        os.getenv("STOREFRONT_REQUEST_TIMEOUT", "15")
    )                                   # Seconds before a request times out
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
        "User-Agent": "storefront-client/1.0",
    }

    # Paths are relative to API_BASE_URL
    ENDPOINTS: dict[str, str] = {
        "products": "/products",
        "product": "/products/{product_id}",
        "image_urls": "/products/{product_id}/images",
        "image_url": "/products/{product_id}/image",
        "category": "/products/category/{category}",
    }

    # --- Health ---
    HEALTH_SLOW_THRESHOLD_MS: float = 5000.0

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper()

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
