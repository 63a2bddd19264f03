"""Structured logging for the dictionary engine.

Every engine module asks for its own logger with
``logger = get_module_logger(__name__)``; events are emitted as structlog
key/value pairs on top of the standard library ``logging`` root logger.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from .config import settings

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _processors(production: bool) -> list:
    renderer = (
        structlog.processors.JSONRenderer()
        if production
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the root logger.

    Under pytest the root logger is raised above CRITICAL so engine events
    stay out of test output.

    Args:
        log_level: Optional override for settings.LOG_LEVEL.
        is_production: Optional override for settings.is_production. Selects
            JSON instead of console rendering.

    Returns:
        The root structlog logger.
    """
    production = settings.is_production if is_production is None else is_production

    if _is_test_environment():
        level = SILENT
        processors = [structlog.stdlib.add_log_level, structlog.dev.ConsoleRenderer()]
    else:
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)
        processors = _processors(production)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger(name: str) -> BoundLogger:
    """Return the root logger bound to module name and its last component."""
    return logger.bind(component=name.rsplit(".", 1)[-1], module_path=name)
