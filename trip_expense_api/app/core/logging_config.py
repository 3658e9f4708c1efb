"""
Basic logging configuration for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Log records carry the timestamp, logger
name, level and message.  Handlers installed here are tagged by name
so calling the function again, e.g. once per ``create_app`` call in
tests, does not duplicate output.
"""

import logging
from pathlib import Path
from typing import Optional

_HANDLER_PREFIX = "trip_expense_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If empty or omitted, no
        file handler is added.  Paths are resolved relative to the
        current working directory.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    if any((h.get_name() or "").startswith(_HANDLER_PREFIX) for h in logger.handlers):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(f"{_HANDLER_PREFIX}.console")
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(f"{_HANDLER_PREFIX}.file")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
