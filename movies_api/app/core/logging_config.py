"""
Root logger setup for the movies service.

Every module logs through ``logging.getLogger(__name__)``; this module
only decides where those records end up.  Output goes to standard
output so the startup line printed by ``run.py`` shows up next to the
uvicorn access log, and can optionally be copied to a file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send log records to stdout (and ``logfile``, if given).

    Does nothing when the root logger already has handlers, so calling
    ``create_app`` more than once does not duplicate output.

    Parameters
    ----------
    level : str
        Name of the minimum level to emit, in any case.  Names the
        ``logging`` module does not know fall back to ``INFO``.
    logfile : Optional[str]
        Extra destination for the same records.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
