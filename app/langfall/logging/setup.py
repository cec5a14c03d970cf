"""Structlog configuration and logger setup.

Configures structlog with callsite context, exception formatting and
environment-aware rendering (console in development, JSON in production).

Usage:
    from langfall.logging import configure_logging, get_module_logger

    # Configure logging once at app startup; importing langfall never does
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - langfall.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from langfall.configuration import Settings, get_settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production. Controls JSON vs console output.
        settings: Settings to read defaults from (default: get_settings()).

    Returns:
        Configured logger instance

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Basic processors only; nothing is emitted at this root level
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    settings = settings or get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to a name.

    If name is provided, binds the logger to that name. Otherwise uses the
    calling module's name.

    The returned logger is a lazy proxy: it picks up whatever structlog
    configuration is active when it first logs, so importing langfall never
    touches the host application's logging setup.

    Args:
        name: Optional logger name (typically __name__ in calling module)

    Returns:
        Logger proxy with context
    """
    if name:
        return structlog.get_logger(logger_name=name)

    current_frame = inspect.currentframe()
    if current_frame is None or current_frame.f_back is None:
        return structlog.get_logger()

    module = inspect.getmodule(current_frame.f_back)
    if module:
        return structlog.get_logger(logger_name=module.__name__)

    return structlog.get_logger(logger_name="unknown")


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` (last dotted part) and ``module_path``. Safe to call
    at module level; configuration is resolved on first use.

    Example:
        # In langfall/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "langfall.i18n.translator"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None or current_frame.f_back is None:
        return structlog.get_logger(component="unknown")

    module = inspect.getmodule(current_frame.f_back)
    if module:
        module_name = module.__name__
        return structlog.get_logger(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return structlog.get_logger(component="unknown")
