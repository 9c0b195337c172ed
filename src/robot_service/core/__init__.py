"""Core utilities"""

from .config import Settings, get_settings
from .exceptions import InvalidRobotInputError, MutationError, RobotNotFoundError
from .logging import get_logger, setup_logger

__all__ = [
    "Settings",
    "get_settings",
    "setup_logger",
    "get_logger",
    "MutationError",
    "RobotNotFoundError",
    "InvalidRobotInputError",
]
