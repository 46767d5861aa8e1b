"""Shared package logger."""
import logging
from pathlib import Path
import sys
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

logger = logging.getLogger("interactive_calculator")


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """
    Attach handlers to the package logger.

    Logs go to stderr (and optionally to a file) so that stdout only carries
    the calculator conversation. Calling it again replaces the previous handlers.

    :param level: Logging level name or number
    :param Path log_file: Optional path of a UTF-8 log file

    :return: None
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
