"""
Centralized logging configuration for quarktui.

Full-screen terminal applications cannot log to stdout/stderr without tearing
the frame apart, so every handler installed here writes to a file.
"""
import logging
from pathlib import Path

from quarktui.config import LOG_DIR, LOG_FILE_NAME

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _file_handler(level: int = logging.NOTSET) -> logging.FileHandler:
    """Create the shared file handler, making sure the log directory exists."""
    logs_dir = Path(LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(logs_dir / LOG_FILE_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(verbose: bool = False):
    """Setup centralized logging for the entire application.

    Args:
        verbose: Enable debug level logging if True
    """
    # Clear any existing handlers to avoid stdout/stderr leakage
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    level = logging.DEBUG if verbose else logging.INFO
    file_handler = _file_handler(level)

    logging.root.setLevel(level)
    logging.root.handlers = [file_handler]

    # prompt_toolkit runs on asyncio, keep its warnings off the screen too
    for logger_name in ['quarktui', 'asyncio']:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.handlers = [file_handler]
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance that's guaranteed to only log to files.

    Loggers below the ``quarktui`` namespace propagate to the package logger
    configured by :func:`setup_logging`. Any other name gets its own file
    handler the first time it is requested.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance configured for file-only output
    """
    logger = logging.getLogger(name)

    if name == 'quarktui' or name.startswith('quarktui.'):
        package_logger = logging.getLogger('quarktui')
        package_logger.propagate = False
        if not package_logger.handlers:
            package_logger.addHandler(logging.NullHandler())
        return logger

    logger.propagate = False
    if not logger.handlers:
        logger.addHandler(_file_handler())

    return logger
