# storefront/config/logging_config.py

"""Per-run timestamped logging configuration for storefront.

Each launch creates a dedicated log file inside ``logs/`` named after the
launch timestamp (e.g. ``logs/run_20260214_153045.log``). Every
``storefront.*`` logger routes through this file handler, so the client,
repository and CLI output all land in the same per-run log.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from storefront.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_level() -> int:
    """Resolve Settings.LOG_LEVEL to a logging level, WARNING if unknown."""
    level = logging.getLevelName(Settings.LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def _with_format(
    handler: logging.Handler, level: int, fmt: str,
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=_DATE_FORMAT))
    return handler


def setup_logging() -> Path:
    """Attach the per-run file and console handlers to ``storefront``.

    Safe to call more than once; handlers are only added the first time.

    Returns:
        The :class:`~pathlib.Path` of this run's log file.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    root_logger = logging.getLogger("storefront")
    root_logger.setLevel(logging.DEBUG)
    if root_logger.handlers:
        return log_file

    root_logger.addHandler(
        _with_format(
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.DEBUG,
            _FILE_FORMAT,
        )
    )
    root_logger.addHandler(
        _with_format(
            logging.StreamHandler(sys.stderr),
            _console_level(),
            _CONSOLE_FORMAT,
        )
    )

    root_logger.info("Logging initialised, log file: %s", log_file)
    return log_file
