# storefront/services/health_checker.py

"""Backend connectivity health checker."""

import logging
import time
from dataclasses import dataclass

from storefront.config.settings import Settings
from storefront.models.result import Error
from storefront.repository.product_repository import ProductRepository

logger = logging.getLogger("storefront.health")


@dataclass
class HealthResult:
    """Result of a single backend health check."""

    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


class HealthChecker:
    """Probes the backend by timing a full product listing."""

    def __init__(
        self,
        repository: ProductRepository,
        slow_threshold_ms: float | None = None,
    ) -> None:
        self.repository = repository
        self.slow_threshold_ms = (
            slow_threshold_ms
            if slow_threshold_ms is not None
            else Settings.HEALTH_SLOW_THRESHOLD_MS
        )

    async def check(self) -> HealthResult:
        """Run the probe and classify the backend as ok, slow or down."""
        start = time.monotonic()
        result = await self.repository.get_all_products()
        elapsed_ms = (time.monotonic() - start) * 1000

        if isinstance(result, Error):
            message = (
                f"HTTP {result.code}: {result.message}"
                if result.code is not None
                else result.message[:80]
            )
            health = HealthResult(
                status="down", latency_ms=elapsed_ms, message=message,
            )
        elif elapsed_ms > self.slow_threshold_ms:
            health = HealthResult(
                status="slow",
                latency_ms=elapsed_ms,
                message="High latency",
            )
        else:
            health = HealthResult(
                status="ok",
                latency_ms=elapsed_ms,
                message=f"{len(result.value)} products",
            )

        logger.info(
            "Health check: %s (%.0fms) %s",
            health.status,
            health.latency_ms,
            health.message,
        )
        return health
