"""Logging setup: loguru is the single sink for the site.

Standard-library records (uvicorn, httpx, starlette) are intercepted and
re-emitted through loguru. Outside dev mode records are serialized as JSON
lines for the hosting platform's log collector.
"""

import inspect
import logging
import os
import sys

from loguru import logger

# Chatty third-party loggers and the level they are capped at
_QUIET_LOGGERS: dict[str, int] = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}

_DEV_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward a stdlib ``LogRecord`` to loguru, keeping the caller's frame."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk past logging internals so loguru reports the real call site
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str | None = None, dev: bool | None = None) -> None:
    """Install loguru as the only handler.

    Args:
        level: Minimum level; defaults to ``KAHU_LOG_LEVEL`` or INFO.
        dev: Colored human format when true, JSON lines otherwise;
            defaults to the ``KAHU_DEV`` flag.
    """
    if dev is None:
        dev = os.environ.get("KAHU_DEV", "0") == "1"
    level = level or os.environ.get("KAHU_LOG_LEVEL", "INFO")

    logger.remove()
    if dev:
        logger.add(sys.stderr, format=_DEV_FORMAT, colorize=True, level=level)
    else:
        logger.add(sys.stderr, serialize=True, level=level)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, cap in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(cap)
