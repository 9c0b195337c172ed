"""Logging configuration"""

import logging
import sys
from typing import Optional, TextIO

from robot_service.core.config import get_settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    service_name: str,
    level: Optional[str] = "INFO",
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Setup the service logger

    Loggers returned by ``get_logger`` are children of this one and
    propagate their records to its handler.

    Args:
        service_name: Name of the service
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        stream: Output stream, stdout when omitted

    Returns:
        Configured logger
    """
    log_level = getattr(logging, (level or "INFO").upper())

    logger = logging.getLogger(service_name)
    logger.setLevel(log_level)
    logger.propagate = False

    # Calling setup twice must not duplicate output
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """Get the service logger, or a child logger for one component"""
    name = get_settings().service_name
    if component:
        name = f"{name}.{component}"
    return logging.getLogger(name)
