"""Shared test fixtures."""

import pytest

from showcase.db.base import Base
from showcase.db.engine import ConnectionManager
# Import all models to register with Base.metadata
import showcase.db.models  # noqa: F401
from showcase.models.project import Project
from showcase.repositories.project_repo import ProjectRepository

MEMORY_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def manager():
    """Connection manager on an in-memory SQLite store with the projects table."""
    manager = ConnectionManager(MEMORY_URL)
    async with manager.statement() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def repo(manager):
    return ProjectRepository(manager)


@pytest.fixture
def sample_project() -> Project:
    return Project(
        title="Weather Dashboard",
        description="Seven-day forecasts with radar overlays",
        img_url="https://img.example.com/weather.png",
        tech_used="React, Node.js, OpenWeather API",
        github_url="https://github.com/example/weather-dashboard",
        live_demo_link="https://weather.example.com",
    )
