"""Root logging setup."""

from __future__ import annotations

import logging
import contextlib

from sandbench.config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT

from .context import install_log_context


def configure_logging(level: str | None = None) -> None:
    """Initialize root logging configuration once per process."""
    resolved = (level or APP_LOG_LEVEL).upper()

    install_log_context()
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=resolved, format=APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)
    else:
        root_logger.setLevel(resolved)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(resolved)
                handler.setFormatter(logging.Formatter(APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT))

    logging.getLogger("sandbench").setLevel(resolved)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
