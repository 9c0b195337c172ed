"""GraphQL queries for Robot Service"""

from typing import List, Optional
import strawberry

from robot_service.schema.types import Robot, parse_robot_id


@strawberry.type
class Query:
    """Read side of the robot fleet"""

    @strawberry.field(description="Every robot currently registered")
    async def robots(self, info: strawberry.Info) -> List[Robot]:
        rows = await info.context["repository"].get_all()
        return [Robot.from_dict(row) for row in rows]

    @strawberry.field(description="A single robot, null for unknown or malformed IDs")
    async def robot(self, id: strawberry.ID, info: strawberry.Info) -> Optional[Robot]:
        robot_id = parse_robot_id(id)
        if robot_id is None:
            return None

        row = await info.context["repository"].get_by_id(robot_id)
        return Robot.from_dict(row) if row else None

    @strawberry.field(description="Robots deployed at one site")
    async def robots_by_site(self, site_id: int, info: strawberry.Info) -> List[Robot]:
        rows = await info.context["repository"].get_by_site(site_id)
        return [Robot.from_dict(row) for row in rows]
