"""Structured logging setup built on structlog and the standard logging module."""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from src.config.schemas.logging_schema import LoggingConfig

PACKAGE_LOGGER = "src"

# Processors shared by structlog loggers and foreign (plain logging) records
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    """Route structlog through the standard logging module."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_formatter(renderer: str) -> structlog.stdlib.ProcessorFormatter:
    """Create a handler formatter rendering either console lines or JSON."""
    if renderer == "json":
        final = structlog.processors.JSONRenderer()
    else:
        final = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            final,
        ],
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the package using structlog.

    Handlers installed by a previous call are replaced, so calling this more
    than once never duplicates output.

    Args:
        config: Logging configuration. Defaults to LoggingConfig() when omitted.

    Returns:
        Configured structlog logger for the package.
    """
    if config is None:
        config = LoggingConfig()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, config.level))
    package_logger.propagate = False

    formatter = _build_formatter(config.renderer)
    handlers: List[logging.Handler] = []

    if config.destination in ("console", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path or "logs/patterns.log")
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Remove handlers from earlier calls and add new ones
    for handler in package_logger.handlers[:]:
        if getattr(handler, "_patterns_handler", False):
            package_logger.removeHandler(handler)
            handler.close()

    for handler in handlers:
        handler._patterns_handler = True
        package_logger.addHandler(handler)

    logger = get_logger(PACKAGE_LOGGER)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        renderer=config.renderer,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.stdlib.get_logger(name)


if not structlog.is_configured():
    _configure_structlog()
