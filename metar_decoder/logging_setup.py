"""Logging configuration for the command line and the API."""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from metar_decoder.settings import LOG_FILE, LOG_LEVEL

__all__ = ["setup_logging"]

LOGGER_NAME = "metar_decoder"


def setup_logging(level: str = LOG_LEVEL, log_file: Optional[str] = LOG_FILE) -> logging.Logger:
    """Configure the ``metar_decoder`` logger and return it.

    Console output goes to stderr so that decoded reports written to stdout
    stay machine readable. When ``log_file`` is given a rotating file handler
    (10 MB, five backups) receives the detailed format as well. Calling this
    again replaces the handlers installed by the previous call.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    )
    simple_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    return logger
