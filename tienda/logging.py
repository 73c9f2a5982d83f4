"""
Logging setup for Tienda.

Modules only ask for loggers; the application entry point calls
configure_logging() once with its Settings (LOG_LEVEL, TIENDA_ENV).
Nothing is configured on import, so library use and tests keep whatever
handlers the host process installed.
"""

import logging
import sys
from functools import cache
from typing import Optional

from tienda.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

HANDLER_NAME = "tienda"


def configure_logging(settings: Optional[Settings] = None) -> logging.Handler:
    """
    Install (or retune) the stdout handler on the root logger.

    Calling it again replaces level and format instead of stacking handlers.
    Unknown level names fall back to INFO.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    handler = next((h for h in root.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)

    handler.setFormatter(
        logging.Formatter(LOG_FORMAT_SIMPLE if settings.is_production else LOG_FORMAT)
    )
    root.setLevel(level)

    # Upstash client logs every REST call through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return handler


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def clip_for_log(value, max_length: int = 80) -> str:
    """repr() of value cut to max_length; repr already escapes newlines."""
    text = repr(value)
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "clip_for_log",
    "configure_logging",
    "get_logger",
]
