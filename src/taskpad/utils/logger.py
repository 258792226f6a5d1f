"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "taskpad"
_LOG_FILE = "taskpad.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _has_file_handler(logger: logging.Logger, log_path: Path) -> bool:
    """True if *logger* already writes to *log_path* through a rotating handler."""
    target = str(log_path.resolve())
    return any(
        isinstance(h, logging.handlers.RotatingFileHandler)
        and str(Path(h.baseFilename).resolve()) == target
        for h in logger.handlers
    )


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Other handlers already on the logger do not stop the log file handler
    from being added.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / _LOG_FILE

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if not _has_file_handler(logger, log_path):
        handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
