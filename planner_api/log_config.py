"""Logging setup for the planner API process."""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Package loggers that also write to their own file under log_dir
FILE_LOGGERS = ["planner_api"]


def setup_logging(level=logging.INFO, log_dir="logs"):
    """Attach a console handler to the root logger and a rotating file
    (5 MB, 3 backups) to each logger in FILE_LOGGERS.

    ``level`` may be a name such as "debug" (as read from LOG_LEVEL).
    Leaves logging alone when the root logger already has handlers, e.g.
    under a test runner or a WSGI server that configured it first.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    if root.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    os.makedirs(log_dir, exist_ok=True)
    for name in FILE_LOGGERS:
        handler = RotatingFileHandler(
            os.path.join(log_dir, f"{name}.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
        )
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logging.getLogger(name).addHandler(handler)
