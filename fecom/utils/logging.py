import logging
from typing import Union

_logger = None

LOGGER_NAME = "fecom"


def get_logger():
    global _logger
    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(logging.INFO)
        if not _logger.hasHandlers():
            # StreamHandler defaults to stderr, keeping progress apart from data rows
            handler = logging.StreamHandler()
            formatter = logging.Formatter('[%(levelname)s] %(message)s')
            handler.setFormatter(formatter)
            _logger.addHandler(handler)
    return _logger


def set_log_level(level: Union[str, int]) -> None:
    """Set the fecom logger level from a name like 'DEBUG' or a logging constant."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    get_logger().setLevel(level)
