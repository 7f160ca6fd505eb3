"""
Logging configuration shared by the server and the command line client.

``setup_logging`` attaches a console handler (and, when a log file is
given, a file handler) to the root logger the first time it is called.
Later calls only change the root level: the server configures logging
when the application is created, and the ``recipe-book`` CLI must still
be able to raise or lower verbosity with ``--log-level`` afterwards.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.  Always
        applied, even when handlers are already installed.
    logfile : Optional[str]
        Path to a file to log messages to.  Only honoured on the first
        call, together with the console handler.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
