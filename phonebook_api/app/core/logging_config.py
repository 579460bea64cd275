"""
Logging configuration for the phonebook service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and decides whether per‑request access
lines are emitted.  Access lines are written to the ``ACCESS_LOGGER``
logger by the request logging middleware and propagate to the root
handlers, so they share the format of every other message.
"""

import logging
from pathlib import Path
from typing import Optional

ACCESS_LOGGER = "phonebook_api.access"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> list:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, access_log: bool = True) -> None:
    """Configure the root logger and the access logger.

    Root handlers are attached only once, so calling ``create_app``
    repeatedly (as the tests do) does not duplicate output.  Levels are
    applied on every call.

    Parameters
    ----------
    level : str
        Root level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of an additional log file.  Empty or ``None`` means
        console only.
    access_log : bool
        When false the access logger is raised to ``WARNING`` so the
        per‑request ``INFO`` lines are dropped.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not root.handlers:
        for handler in _build_handlers(logfile):
            root.addHandler(handler)

    logging.getLogger(ACCESS_LOGGER).setLevel(logging.INFO if access_log else logging.WARNING)
