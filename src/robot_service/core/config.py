"""
Service settings

Values come from environment variables or a local ``.env`` file, matched
case-insensitively (``NUM_ROBOTS=10``, ``GRAPHIQL=false`` ...).
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    service_name: str = "robot-service-graphql"
    environment: str = "development"
    debug: bool = True

    host: str = "0.0.0.0"
    port: int = 8001

    # Size of the seeded in-memory fleet
    num_robots: int = 50

    # Serve the GraphiQL IDE on GET /graphql
    graphiql: bool = True

    cors_origins: list[str] = ["*"]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Lazily build and cache the settings"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
