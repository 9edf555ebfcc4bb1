"""
Logging setup shared by the services and the launcher.

Log level names are the ones uvicorn understands (``critical``,
``error``, ``warning``, ``info``, ``debug`` and ``trace``), so the same
value can drive both the root logger and uvicorn's own ``uvicorn.*``
loggers.  ``WARN`` and ``FATAL`` are accepted as aliases.

``setup_logging`` may be called more than once: the application module
configures logging at import time and the launcher calls it again with
the level requested on the command line.
"""

import logging
from pathlib import Path
from typing import Optional

from uvicorn.config import LOG_LEVELS


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}


def canonical_log_level(name: str) -> str:
    """Lowercase ``name`` and resolve aliases, without validating it."""
    name = name.strip().lower()
    return LOG_LEVEL_ALIASES.get(name, name)


def normalize_log_level(name: str) -> str:
    """Return the canonical level name or raise ``ValueError``."""
    level = canonical_log_level(name)
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {name!r}; expected one of: {', '.join(LOG_LEVELS)}")
    return level


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path
        for handler in logger.handlers
    )


def setup_logging(level: str = "info", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    The console handler is attached only on the first call.  Every call
    applies ``level`` and attaches a file handler for ``logfile`` unless
    one for the same path is already present.

    Raises
    ------
    ValueError
        If ``level`` is not a known level name.
    """
    numeric_level = LOG_LEVELS[normalize_log_level(level)]
    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(logger, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
