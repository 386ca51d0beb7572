# instance_describer/shared/logging_setup.py
"""
Central logging configuration for Instance Describer.

Goals:
- Provide a single place to configure logging format and level.
- Make it easy to get a logger in any module:
      from instance_describer.shared.logging_setup import get_logger
      log = get_logger(__name__)
- Follow the settings in `instance_describer.shared.config`:
      DESCRIBER_LOG_LEVEL   (DEBUG, INFO, WARNING, ERROR)
      DESCRIBER_LOG_FORMAT  (json | console)

Modules log through structlog with event-style messages:

    logger = structlog.get_logger()
    logger.info("instance_check_failed", reason=reason)

`init_logging` routes structlog through the standard `logging` module so a
host application's handlers still receive every record. It is idempotent;
calling it more than once is safe.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import structlog

from instance_describer.shared.config import LogFormat, settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False


def _level_from_settings() -> int:
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)


def init_logging(
    level: Optional[int] = None,
    log_format: Optional[LogFormat] = None,
    *,
    force: bool = False,
) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level:
            Logging level (e.g. logging.DEBUG). Defaults to LOG_LEVEL.
        log_format:
            JSON lines or human readable console output. Defaults to
            LOG_FORMAT.
        force:
            Reconfigure even if logging was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    if level is None:
        level = _level_from_settings()
    if log_format is None:
        log_format = settings.LOG_FORMAT

    renderer: Any
    if log_format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    logging.basicConfig(level=level, format="%(message)s", force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _INITIALIZED = True


def get_logger(name: Optional[str] = None) -> Any:
    """
    Get a structlog logger, ensuring logging is initialized.

    Args:
        name:
            Logger name, usually __name__ of the calling module.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]
