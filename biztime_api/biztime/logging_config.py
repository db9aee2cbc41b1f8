"""Structured logging configuration (structlog), driven by APP_ENV / LOG_LEVEL / DB_ECHO."""
import logging
import sys

import structlog

from biztime.config import Settings, get_settings

# CorrelationIdMiddleware already writes one "request_handled" line per request.
ACCESS_LOGGERS = ("uvicorn.access",)
SQL_LOGGERS = ("sqlalchemy.engine",)


def build_renderer(app_env: str):
    """Colored console locally, plain console under tests (captured output), JSON elsewhere."""
    if app_env == "local":
        return structlog.dev.ConsoleRenderer()
    if app_env == "test":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def quiet_library_loggers(settings: Settings) -> None:
    """Silence duplicate access lines; SQL statements only when DB_ECHO is on."""
    for name in ACCESS_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    sql_level = logging.INFO if settings.db_echo else logging.WARNING
    for name in SQL_LOGGERS:
        logging.getLogger(name).setLevel(sql_level)


def configure_logging() -> None:
    """Configure structlog and standard logging for the application."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            build_renderer(settings.app_env),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    quiet_library_loggers(settings)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound logger for the given module name."""
    return structlog.get_logger(name)
