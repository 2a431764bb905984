"""Tests for fatal startup handling."""

import pytest

from showcase.config import Settings
from showcase.repositories.project_repo import ProjectRepository
from showcase.startup import open_store


def make_settings(**overrides) -> Settings:
    values = {
        "db_host": "localhost",
        "db_user": "portfolio",
        "db_password": "secret",
        "db_name": "portfolio",
        "database_url": "sqlite+aiosqlite://",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


async def test_open_store_establishes_connection():
    repo = await open_store(make_settings())
    try:
        assert isinstance(repo, ProjectRepository)
        assert repo.manager.established is True
    finally:
        await repo.manager.dispose()


async def test_missing_parameter_exits(caplog):
    with pytest.raises(SystemExit) as exc_info:
        await open_store(make_settings(db_user=None))
    assert exc_info.value.code == 1
    assert "DB_USER" in caplog.text


async def test_connection_failure_exits(tmp_path, caplog):
    url = f"sqlite+aiosqlite:///{tmp_path / 'nowhere' / 'store.db'}"
    with pytest.raises(SystemExit) as exc_info:
        await open_store(make_settings(database_url=url))
    assert exc_info.value.code == 1
    assert "Startup aborted" in caplog.text
