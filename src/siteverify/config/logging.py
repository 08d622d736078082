"""structlog setup for harness runs.

Events from the verification policies go through structlog. Playwright's
driver and the pytest plugins log through the standard library; they are only
let through below WARNING when debugging.
"""

import logging

import structlog
from structlog.typing import Processor

from siteverify.config.settings import Settings, get_settings

LIBRARY_LOGGERS = ("playwright", "pytest_playwright", "asyncio")


def build_renderer(settings: Settings) -> Processor:
    """Console output for local debugging, JSON lines for CI artifacts."""
    if settings.debug:
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer(sort_keys=True)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and quiet the third-party stdlib loggers.

    Args:
        settings: Settings to configure from. Defaults to get_settings().
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if not settings.debug:
        # ConsoleRenderer formats tracebacks itself
        processors.append(structlog.processors.format_exc_info)
    processors.append(build_renderer(settings))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        # Test sessions reconfigure; cached loggers would keep the old level
        cache_logger_on_first_use=False,
    )

    structlog.contextvars.bind_contextvars(app=settings.app_name, base_url=settings.base_url)

    library_level = level if settings.debug else max(level, logging.WARNING)
    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
