from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "FACET_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "FACET_BROWSER_LOG_LEVEL"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    # `extra={...}` keys passed to the loggers become top-level JSON fields
    return jsonlogger.JsonFormatter(
        JSON_FIELDS,
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
    )


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    Format: `force_format` if given, else $FACET_BROWSER_LOG_FORMAT, else
    "json". Anything other than "plain" means JSON.

    Level: `level` if given, else $FACET_BROWSER_LOG_LEVEL (a level name),
    else INFO. Unknown level names fall back to INFO.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(format_mode))

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    root.handlers.clear()
    root.addHandler(handler)
