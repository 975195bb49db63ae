"""Logging setup shared by the API process.

Modules obtain their logger with ``logging.getLogger(__name__)`` as
usual; this module only decides where records go. Records are always
written to stdout and, when ``LOG_DIR`` is configured, appended to a
daily ``receipt_processor_YYYY-MM-DD.log`` file in that directory.
"""

from __future__ import annotations

import datetime as dt
import logging
import sys
from pathlib import Path
from typing import Optional

from receipt_processor.core.config import Settings, settings as default_settings

LOG_FORMAT = "%(levelname)s: %(asctime)s [%(filename)s:%(lineno)d] %(name)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

# Marker attribute so repeated configuration replaces only our own handlers
_HANDLER_TAG = "_receipt_processor_handler"


def log_file_path(log_dir: str | Path, today: Optional[dt.date] = None) -> Path:
    """Return the path of the log file for ``today`` inside ``log_dir``."""
    today = today or dt.date.today()
    return Path(log_dir) / f"receipt_processor_{today.isoformat()}.log"


def configure_logging(settings: Optional[Settings] = None) -> Optional[Path]:
    """Install stdout (and optional file) handlers on the root logger.

    Safe to call more than once; handlers installed by a previous call
    are removed first. Returns the log file path when file logging is
    enabled, otherwise ``None``.
    """
    settings = settings or default_settings
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, _HANDLER_TAG, True)
    root.addHandler(stream_handler)

    log_path: Optional[Path] = None
    if settings.LOG_DIR:
        log_path = log_file_path(settings.LOG_DIR)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_TAG, True)
        root.addHandler(file_handler)

    root.setLevel(settings.LOG_LEVEL)
    logging.getLogger(__name__).info("Logger initialized logPath=%s", log_path)
    return log_path


__all__ = ["configure_logging", "log_file_path", "LOG_FORMAT"]
