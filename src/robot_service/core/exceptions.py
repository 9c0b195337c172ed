"""Errors raised by mutation resolvers.

Strawberry turns any exception raised in a resolver into an entry of the
response ``errors`` list, so these only carry a readable message.
"""

from typing import Union


class MutationError(Exception):
    """Base class for errors raised while executing a mutation"""


class RobotNotFoundError(MutationError):
    """Raised when a mutation targets a robot that does not exist"""

    def __init__(self, robot_id: Union[int, str]):
        self.robot_id = robot_id
        super().__init__(f"Robot {robot_id} not found")


class InvalidRobotInputError(MutationError):
    """Raised when mutation input fails domain validation"""
