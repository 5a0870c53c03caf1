import logging
import sys

import structlog

from trivia.core.config import get_settings

_CONSOLE_ENVS = frozenset({"dev", "local"})


def _select_renderer(app_env: str) -> structlog.typing.Processor:
    if app_env.strip().lower() in _CONSOLE_ENVS:
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def configure_logging(log_level: str = "INFO", *, app_env: str = "prod") -> None:
    """Route structlog events through stdlib logging on stdout.

    Development environments get a human readable console renderer, everything
    else emits one JSON object per line.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _select_renderer(app_env),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, app_env=settings.app_env)
