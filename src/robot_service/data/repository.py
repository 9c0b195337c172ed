"""Robot data repository with in-memory data"""

from datetime import date, timedelta
from typing import List, Optional

from robot_service.core.config import get_settings


STATUSES = ["active", "idle", "maintenance", "offline"]
MODELS = ["Model-X1", "Model-X2", "Model-Y1", "Model-Z1"]


class RobotRepository:
    """Robot repository for data access"""

    def __init__(self, num_robots: Optional[int] = None):
        if num_robots is None:
            num_robots = get_settings().num_robots
        self._init_data(num_robots)

    def _init_data(self, num_robots: int):
        """Initialize in-memory data"""
        self.robots = [
            {
                "id": i,
                "name": f"Robot-{i}",
                "model": MODELS[(i - 1) % len(MODELS)],
                "status": STATUSES[(i - 1) % len(STATUSES)],
                "owner_id": ((i - 1) % 100) + 1,
                "site_id": ((i - 1) % 5) + 1,
                "battery": 100 - ((i * 7) % 80),
                "last_maintenance": (date(2026, 1, 1) + timedelta(days=i % 90)).isoformat(),
                "location": f"Zone-{chr(65 + (i % 10))}"  # Zone-A ~ Zone-J
            }
            for i in range(1, num_robots + 1)
        ]
        # Never reused, ids of deleted robots stay retired
        self._next_id = num_robots + 1

    def _find(self, robot_id: int) -> Optional[dict]:
        return next((r for r in self.robots if r["id"] == robot_id), None)

    async def get_all(self) -> List[dict]:
        """Get all robots"""
        return [r.copy() for r in self.robots]

    async def get_by_id(self, robot_id: int) -> Optional[dict]:
        """Get single robot by ID"""
        robot = self._find(robot_id)
        return robot.copy() if robot else None

    async def get_by_site(self, site_id: int) -> List[dict]:
        """Get all robots by site ID"""
        return [r.copy() for r in self.robots if r["site_id"] == site_id]

    async def create(self, data: dict) -> dict:
        """
        Store a new robot

        The ID is assigned here; any ``id`` key in ``data`` is ignored.
        """
        robot = {**data, "id": self._next_id}
        self._next_id += 1
        self.robots.append(robot)
        return robot.copy()

    async def update(self, robot_id: int, changes: dict) -> Optional[dict]:
        """Apply changes to a robot, returns None if it does not exist"""
        robot = self._find(robot_id)
        if robot is None:
            return None
        robot.update({k: v for k, v in changes.items() if k != "id"})
        return robot.copy()

    async def delete(self, robot_id: int) -> bool:
        """Remove a robot, returns False if it does not exist"""
        robot = self._find(robot_id)
        if robot is None:
            return False
        self.robots.remove(robot)
        return True

    def get_count(self) -> int:
        """Get total robot count"""
        return len(self.robots)


_repository: Optional[RobotRepository] = None


def get_repository() -> RobotRepository:
    """Get the process-wide repository (singleton)"""
    global _repository
    if _repository is None:
        _repository = RobotRepository()
    return _repository
