"""
Logging setup for the inventory service.

Records from the store, the routes and uvicorn all end up on the root
logger in one format.  ``setup_logging`` does two things:

* the ``warehouse_inventory_api`` logger always gets ``LOG_LEVEL``,
  even when the hosting process (pytest, an embedding application)
  already owns the root handlers;
* on a bare process it installs the root handlers (console, plus a
  file when ``LOG_FILE`` is set) and strips uvicorn's own handlers so
  its error and access lines propagate to them instead of being
  printed twice in a different format.

The handler part runs once per process; the level part runs on every
call, so each ``create_app(settings)`` applies its own level.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "warehouse_inventory_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _install_root_handlers(level: int, logfile: Optional[str]) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in _UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Apply ``level`` to the service loggers and return it as a number.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to also write log records to.  Only honoured
        when the root logger has no handlers yet.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)
    if not logging.getLogger().handlers:
        _install_root_handlers(numeric_level, logfile)
    return numeric_level
