"""
Logging setup for the Order Flow API.

``setup_logging`` attaches handlers to the root logger once per
process: a console handler always, plus a size-rotated file handler
when ``LOG_FILE`` is set.  Services log through module loggers
(``logging.getLogger(__name__)``) and inherit this configuration.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Log file rotation: 5 MB per file, three backups.
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

# Library loggers that are too chatty at INFO.
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Level name for the root logger, case insensitive.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        File to log to in addition to the console, resolved against
        the working directory.
    quiet : Iterable[str]
        Loggers capped at ``WARNING`` regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (pytest, or create_app called twice).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        file_handler = RotatingFileHandler(
            Path(logfile).resolve(),
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
