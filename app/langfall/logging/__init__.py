"""Structured logging infrastructure.

Centralized structlog configuration for langfall.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module

Example:
    from langfall.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from langfall.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
]
