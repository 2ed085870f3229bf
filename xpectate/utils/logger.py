"""
Xpectate Logging.

structlog setup for the watcher. Standard output is the only channel.
Requires Python 3.11+.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from xpectate.utils.config import Settings, get_settings


def _renderer(settings: Settings) -> list[Processor]:
    """Final processors for the configured output format."""
    if settings.logging.format == "json":
        app = {"app": settings.app_name, "version": settings.app_version}

        def add_app(logger: object, method_name: str, event_dict: dict) -> dict:
            return {**app, **event_dict}

        return [add_app, structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure structlog at the level and format from settings.

    Args:
        settings: Settings to read from (defaults to get_settings())
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.logging.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderer(settings),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )

    # watchdog logs through the standard library
    logging.getLogger("watchdog").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger named after the caller."""
    return structlog.get_logger(name)


class LoggerMixin:
    """
    Gives a class a ``self.log`` bound to its class name.

    Usage:
        class MyClass(LoggerMixin):
            def my_method(self):
                self.log.info("doing_something", key="value")
    """

    @property
    def log(self) -> structlog.stdlib.BoundLogger:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger
