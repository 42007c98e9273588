"""
Application logging setup

The TUI owns the terminal, so diagnostics go to a log file instead.
"""
import logging
from pathlib import Path
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_FILE_NAME = "logmon.log"


def configure_logging(log_dir: Union[str, Path], level: int = logging.INFO) -> logging.Logger:
    """
    Attach a file handler to the package logger

    Args:
        log_dir: Directory for logmon.log (created if missing)
        level: Logging level for the package logger

    Returns:
        The configured "LOGMON" logger
    """
    logger = logging.getLogger('LOGMON')
    logger.setLevel(level)

    # Create file handler if not already exists
    if not logger.handlers:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger
