"""
Structured logging configuration for runtime-launcher.

Configures structlog for console or JSON logging with launch context.
"""

import structlog
import logging
import sys
from typing import Any, Optional

from runtime_launcher.infrastructure.config.config import get_settings


def configure_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure structlog on top of standard logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR); defaults to LAUNCHER_LOG_LEVEL
        log_format: "json" for structured output, "text" for the console renderer;
            defaults to LAUNCHER_LOG_FORMAT
    """
    settings = get_settings()
    log_level = log_level or settings.log_level
    log_format = log_format or settings.log_format
    level = getattr(logging, log_level.upper(), logging.INFO)

    # Configure standard logging to use structlog
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    # basicConfig leaves an already configured root logger alone
    logging.getLogger().setLevel(level)

    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "runtime_launcher", **context: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with optional context.

    Args:
        name: Logger name
        **context: Key/value pairs bound to every event

    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name, **context)
