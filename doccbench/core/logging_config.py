import os
import logging
from logging.handlers import RotatingFileHandler
from typing import List

from doccbench.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

handlers: List[logging.Handler] = [logging.StreamHandler()]

# File logging only when the host tool asks for it
if settings.LOG_DIR:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    handlers.append(
        RotatingFileHandler(
            os.path.join(settings.LOG_DIR, "doccbench.log"),
            maxBytes=(10 * 1024 * 1024),   # 10MB per file
            backupCount=7,                 # Last 7 rotated logs kept
            encoding="utf-8"
        )
    )

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format=LOG_FORMAT,
    datefmt=DATE_FORMAT,
    handlers=handlers,
)


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger with the given module name."""
    return logging.getLogger(name)
