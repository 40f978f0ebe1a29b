"""
Logging configuration for the To-Do List API.

``setup_logging`` sets the level of the ``todo_list_api`` logger and,
the first time it runs, gives the root logger a console handler and
optionally a file handler.  Loggers handed to services and routers are
children of ``todo_list_api``, so they inherit both.
"""

import logging
from pathlib import Path
from typing import List, Optional

APP_LOGGER_NAME = "todo_list_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure application logging and return the application logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record.  Only honoured when
        the root logger has no handlers yet.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    root = logging.getLogger()
    if root.handlers:
        # Someone else (pytest, an embedding server) owns the handlers.
        return app_logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in _handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(app_logger.level)
    return app_logger


def get_app_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the application logger or one of its named children."""
    base = logging.getLogger(APP_LOGGER_NAME)
    return base.getChild(name) if name else base
