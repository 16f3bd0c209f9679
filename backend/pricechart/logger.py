# backend/pricechart/logger.py
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pricechart.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_FILE = LOG_DIR / "pricechart.log"

_CONSOLE_FMT = "[%(levelname)s] %(name)s: %(message)s"
_FILE_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level() -> int:
    return getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO)


def _package_logger() -> logging.Logger:
    # one set of handlers on "pricechart"; module loggers propagate to it
    root = logging.getLogger("pricechart")
    if root.handlers:
        return root
    LOG_DIR.mkdir(exist_ok=True, parents=True)
    root.setLevel(_level())
    root.propagate = False

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(_CONSOLE_FMT))
    root.addHandler(console)

    rotating = RotatingFileHandler(LOG_FILE, maxBytes=2_000_000, backupCount=5, encoding="utf-8")
    rotating.setFormatter(logging.Formatter(_FILE_FMT))
    root.addHandler(rotating)
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for a pricechart module; names outside the package are nested under it."""
    _package_logger()
    if name != "pricechart" and not name.startswith("pricechart."):
        name = f"pricechart.{name}"
    return logging.getLogger(name)
