"""GraphQL mutations"""

from .base import (
    DEFAULT_TYPE_CONFIG,
    FEDERATION_TYPE_CONFIG,
    BaseMutation,
    MutationTypeConfig,
    build_mutation_root,
)
from .robot import CreateRobot, DeleteRobot, RechargeRobot, UpdateRobotStatus


Mutation = build_mutation_root(
    CreateRobot,
    UpdateRobotStatus,
    RechargeRobot,
    DeleteRobot,
)


__all__ = [
    "BaseMutation",
    "MutationTypeConfig",
    "DEFAULT_TYPE_CONFIG",
    "FEDERATION_TYPE_CONFIG",
    "build_mutation_root",
    "CreateRobot",
    "UpdateRobotStatus",
    "RechargeRobot",
    "DeleteRobot",
    "Mutation",
]
