import pytest

from robot_service.data import repository as repository_module
from robot_service.data.repository import RobotRepository
from robot_service.schema import schema as robot_schema


@pytest.fixture
def repository() -> RobotRepository:
    """Small deterministic repository, fresh for every test."""
    return RobotRepository(num_robots=5)


@pytest.fixture
def shared_repository(monkeypatch, repository) -> RobotRepository:
    """Install the test repository as the process-wide one used by the app."""
    monkeypatch.setattr(repository_module, "_repository", repository)
    return repository


@pytest.fixture
def execute(repository):
    """Run a GraphQL operation against the service schema."""

    async def _execute(query: str, variables: dict = None):
        return await robot_schema.execute(
            query,
            variable_values=variables,
            context_value={"repository": repository},
        )

    return _execute
