"""GraphQL types for Robot Service"""

from enum import Enum
from typing import Optional, TYPE_CHECKING
import strawberry

if TYPE_CHECKING:
    from strawberry.types import Info


@strawberry.enum(description="Operating status of a robot")
class RobotStatus(Enum):
    ACTIVE = "active"
    IDLE = "idle"
    MAINTENANCE = "maintenance"
    OFFLINE = "offline"


@strawberry.federation.type(keys=["id"])
class Robot:
    """Robot GraphQL type with Federation support"""

    id: strawberry.ID
    name: str
    model: str
    status: RobotStatus
    owner_id: int
    site_id: int
    battery: int
    last_maintenance: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Robot":
        """Create Robot from dictionary"""
        return cls(
            id=strawberry.ID(str(data["id"])),
            name=data["name"],
            model=data["model"],
            status=RobotStatus(data["status"]),
            owner_id=data["owner_id"],
            site_id=data["site_id"],
            battery=data["battery"],
            last_maintenance=data.get("last_maintenance"),
            location=data.get("location")
        )

    @classmethod
    async def resolve_reference(cls, id: strawberry.ID, info: "Info") -> Optional["Robot"]:
        """Resolve Federation reference"""
        robot_id = parse_robot_id(id)
        if robot_id is None:
            return None

        repository = info.context["repository"]
        robot_data = await repository.get_by_id(robot_id)

        if not robot_data:
            return None

        return cls.from_dict(robot_data)


# ============== Mutation inputs ==============

@strawberry.input(description="Fields for registering a new robot")
class CreateRobotInput:
    name: str
    model: str
    owner_id: int
    site_id: int
    status: RobotStatus = RobotStatus.IDLE
    battery: int = 100
    last_maintenance: Optional[str] = None
    location: Optional[str] = None


# ============== Mutation payloads ==============

@strawberry.type
class RobotPayload:
    """Result of a mutation that returns the affected robot"""

    robot: Robot


@strawberry.type
class DeleteRobotPayload:
    """Result of a successful robot deletion"""

    id: strawberry.ID


def parse_robot_id(id: strawberry.ID) -> Optional[int]:
    """Repository key for a robot ID, None when it cannot name a robot"""
    try:
        return int(id)
    except (TypeError, ValueError):
        return None
