"""GraphQL mutations for Robot Service"""

from typing import Optional

import strawberry
from pydantic import ValidationError

from robot_service.core.exceptions import InvalidRobotInputError, RobotNotFoundError
from robot_service.core.logging import get_logger
from robot_service.models.robot import RobotCreateModel
from robot_service.schema.mutations.base import BaseMutation
from robot_service.schema.types import (
    CreateRobotInput,
    DeleteRobotPayload,
    Robot,
    RobotPayload,
    RobotStatus,
    parse_robot_id,
)


logger = get_logger("mutations")


def _validation_message(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"Invalid {location}: {first['msg']}"


class CreateRobot(BaseMutation):
    """Register a new robot"""

    payload = RobotPayload

    @staticmethod
    async def resolve(info: strawberry.Info, input: CreateRobotInput) -> RobotPayload:
        try:
            model = RobotCreateModel(
                name=input.name,
                model=input.model,
                status=input.status.value,
                owner_id=input.owner_id,
                site_id=input.site_id,
                battery=input.battery,
                last_maintenance=input.last_maintenance,
                location=input.location,
            )
        except ValidationError as e:
            raise InvalidRobotInputError(_validation_message(e)) from e

        repository = info.context["repository"]
        robot_data = await repository.create(model.model_dump())
        logger.info(f"Created robot {robot_data['id']} ({robot_data['name']})")
        return RobotPayload(robot=Robot.from_dict(robot_data))


class UpdateRobotStatus(BaseMutation):
    """Change the operating status of a robot"""

    payload = RobotPayload

    @staticmethod
    async def resolve(
        info: strawberry.Info,
        id: strawberry.ID,
        status: RobotStatus
    ) -> RobotPayload:
        robot_id = parse_robot_id(id)
        repository = info.context["repository"]
        robot_data = None
        if robot_id is not None:
            robot_data = await repository.update(robot_id, {"status": status.value})

        if not robot_data:
            raise RobotNotFoundError(id)

        logger.info(f"Robot {id} status -> {status.value}")
        return RobotPayload(robot=Robot.from_dict(robot_data))


class RechargeRobot(BaseMutation):
    """Add charge to a robot battery, capped at 100"""

    payload = RobotPayload

    @staticmethod
    async def resolve(info: strawberry.Info, id: strawberry.ID, amount: int) -> RobotPayload:
        if amount <= 0:
            raise InvalidRobotInputError("Recharge amount must be positive")

        robot_id = parse_robot_id(id)
        repository = info.context["repository"]
        robot_data = None
        if robot_id is not None:
            robot_data = await repository.get_by_id(robot_id)

        if not robot_data:
            raise RobotNotFoundError(id)

        battery = min(100, robot_data["battery"] + amount)
        robot_data = await repository.update(robot_id, {"battery": battery})
        logger.debug(f"Robot {id} battery -> {battery}")
        return RobotPayload(robot=Robot.from_dict(robot_data))


class DeleteRobot(BaseMutation):
    """Remove a robot, resolves to null when the robot does not exist"""

    payload = DeleteRobotPayload
    null = True

    @staticmethod
    async def resolve(info: strawberry.Info, id: strawberry.ID) -> Optional[DeleteRobotPayload]:
        robot_id = parse_robot_id(id)
        repository = info.context["repository"]

        if robot_id is None or not await repository.delete(robot_id):
            logger.warning(f"Delete requested for unknown robot {id}")
            return None

        logger.info(f"Deleted robot {id}")
        return DeleteRobotPayload(id=id)
