"""structlog setup on top of the standard library logging module."""

import logging
import sys
from typing import Optional

import structlog

from ..config.settings import Settings, settings as default_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Route structlog through stdlib logging at the configured level.

    Args:
        settings: Settings to read ``log_level`` and ``log_format`` from;
            the module-level settings when omitted
    """
    settings = settings or default_settings
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger().setLevel(level)

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
