from __future__ import annotations

import logging
import os
from typing import cast

import structlog
from structlog.dev import ConsoleRenderer
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from cachehash.version import __version__ as CACHEHASH_VERSION

# Every cachehash logger lives under this stdlib namespace.
LOGGER_NAMESPACE = "cachehash"


def _coerce_level(level: str | int) -> int:
    """Translate a level name or number into the numeric logging level."""
    if isinstance(level, int):
        return level
    try:
        return logging.getLevelNamesMapping()[level.strip().upper()]
    except KeyError:
        raise ValueError(f"Invalid log level: {level}") from None


def configure_logging(level: str | int = "INFO", json_output: bool = True) -> logging.Logger:
    """
    Route cachehash log events through one handler on the package namespace.

    The host application's root logger is left alone. Loggers are not cached,
    so module-level structlog loggers pick up a later reconfiguration.
    """
    numeric_level = _coerce_level(level)
    renderer = structlog.processors.JSONRenderer() if json_output else ConsoleRenderer()

    shared_processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.handlers = [handler]
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger bound with service name and package version."""
    service_name = os.getenv("SERVICE_NAME", "cachehash")
    version = os.getenv("APP_VERSION", CACHEHASH_VERSION)
    return cast(
        BoundLogger,
        structlog.get_logger(name).bind(service_name=service_name, version=version),
    )


__all__ = ["LOGGER_NAMESPACE", "configure_logging", "get_logger"]
