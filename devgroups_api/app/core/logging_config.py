"""
Root logger wiring for the service.

Modules log through ``logging.getLogger(__name__)``; only
``setup_logging`` touches handlers.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send log records to stderr and, if ``logfile`` is given, to that file.

    A root logger that already has handlers is left untouched, so calling
    this for every ``create_app`` is harmless.  Unknown level names mean
    ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    level_value = getattr(logging, level.upper(), None)
    root.setLevel(level_value if isinstance(level_value, int) else logging.INFO)
