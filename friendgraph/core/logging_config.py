# friendgraph/core/logging_config.py

import logging
import sys
from typing import Union

def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the root logger for the service.

    Args:
        level: logging level, either a number or a name such as "DEBUG"

    Returns:
        The application logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Avoid duplicate output when called twice (reload, tests)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    ))
    root_logger.addHandler(console)

    for logger_name in ['sqlalchemy.engine', 'httpx', 'httpcore', 'asyncio']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return get_logger('friendgraph')

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
