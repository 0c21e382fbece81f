"""Logging setup."""

import logging
from pathlib import Path
from typing import Optional, Union

HANDLER_NAMES = ("goautomate.file", "goautomate.console")


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[Path] = None):
    """Setup logging configuration."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if log_file else level)

    # Replace handlers from an earlier call
    for handler in list(logger.handlers):
        if handler.get_name() in HANDLER_NAMES:
            logger.removeHandler(handler)
            handler.close()

    # File handler
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.set_name("goautomate.file")
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.set_name("goautomate.console")
    console_handler.setLevel(level)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)
