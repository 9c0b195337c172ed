"""Domain models"""

from .robot import RobotCreateModel, RobotModel

__all__ = ["RobotCreateModel", "RobotModel"]
