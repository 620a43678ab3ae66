# tests/conftest.py

"""Shared pytest fixtures for all storefront tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from storefront.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Write per-run log files under tmp_path and drop handlers afterwards."""
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    yield
    root_logger = logging.getLogger("storefront")
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
