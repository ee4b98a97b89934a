"""
Logging setup for the roster service.

``setup_logging`` attaches a console handler (and, when ``LOG_FILE`` is
configured, a file handler) to the root logger.  Every record is
rendered as ``timestamp [LEVEL] logger: message``.  uvicorn's own
loggers are told to propagate so that request logs share the format.
Calling the function again is a no-op.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name such as ``"DEBUG"`` or ``"info"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file, resolved against the current
        working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest and repeated ``create_app`` calls land here.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
