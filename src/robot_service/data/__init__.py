"""Data access layer"""

from .repository import RobotRepository, get_repository

__all__ = ["RobotRepository", "get_repository"]
