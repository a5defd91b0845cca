"""
Core logging module.

Loguru is the only logging backend; the service modules, httpx and uvicorn
log through the standard library and are routed into it.
"""

import logging
import os
import sys

from loguru import logger

from app.core.config import settings

# Standard library loggers whose output should end up in loguru
INTERCEPTED_LOGGERS = ("app", "httpx", "uvicorn", "uvicorn.access", "uvicorn.error")


class InterceptHandler(logging.Handler):
    """Forward standard library records to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _add_file_sink(level: str) -> None:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    options = dict(
        level=level,
        rotation=settings.LOG_ROTATION,
        retention=settings.LOG_RETENTION,
        compression="gz",
    )
    if settings.LOG_JSON:
        options["serialize"] = True
    else:
        options["format"] = settings.LOG_FORMAT
    logger.add(os.path.join(settings.LOG_DIR, settings.LOG_FILENAME), **options)


def setup_logging():
    """Configure loguru sinks and route standard library logging into them."""
    level = settings.LOG_LEVEL.upper()
    logger.remove()

    if settings.DEBUG:
        logger.add(
            sys.stderr,
            level=level,
            format=settings.LOG_FORMAT,
            backtrace=True,
            diagnose=True,
        )
    if settings.LOG_FILE_ENABLED:
        _add_file_sink(level)

    # Level used by the request logging middleware
    try:
        logger.level("REQUEST")
    except ValueError:
        logger.level("REQUEST", no=25, color="<green>")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED_LOGGERS:
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    return logger
