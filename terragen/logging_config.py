# terragen/logging_config.py
import logging
import os
from logging import FileHandler, StreamHandler
from typing import Optional

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Logging setup for the command line tool.
    - Console handler always, file handler when log_file is given.
    - Safe to call multiple times (no duplicate handlers); later calls
      only adjust the level.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    if getattr(logger, "_terragen_handlers_installed", False):
        for handler in logger.handlers:
            handler.setLevel(level)
        return

    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    if log_file:
        try:
            os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
            file_handler = FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"[Logger] Warning: failed to attach file handler: {e}")
            log_file = None

    console_handler = StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    logger._terragen_handlers_installed = True  # type: ignore[attr-defined]

    logger.debug("Logging initialized.")
    if log_file:
        logger.debug(f"Log file: {log_file}")
