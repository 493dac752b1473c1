from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMATS = ("json", "plain")

# Dash's dev server logs one line per callback request
_NOISY_LOGGERS = ("werkzeug",)


def _resolve_level(level: Optional[int | str]) -> int:
    if level is None:
        level = os.getenv("ELLE_BROWSER_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(
        level: Optional[int | str] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the browser.

    Level comes from `level`, else ELLE_BROWSER_LOG_LEVEL, else INFO.
    Format comes from `force_format`, else ELLE_BROWSER_LOG_FORMAT, else JSON;
    "plain" gives one readable line per record for local runs.

    Per-request werkzeug lines are only kept at DEBUG level.
    """
    root_level = _resolve_level(level)

    format_mode = (force_format or os.getenv("ELLE_BROWSER_LOG_FORMAT", "json")).lower()
    if format_mode not in LOG_FORMATS:
        raise ValueError(f"Unknown log format '{format_mode}', expected one of {LOG_FORMATS}")

    logger = logging.getLogger()
    logger.setLevel(root_level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(
            root_level if root_level <= logging.DEBUG else logging.WARNING
        )
