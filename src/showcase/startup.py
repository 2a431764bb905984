"""Process startup: validate configuration and open the store."""

import logging

from showcase.config import Settings, settings as default_settings
from showcase.db.engine import ConnectionManager
from showcase.errors.exceptions import ConfigurationError, DatabaseConnectionError
from showcase.repositories.project_repo import ProjectRepository

logger = logging.getLogger(__name__)


async def open_store(settings: Settings | None = None) -> ProjectRepository:
    """Return a repository on an established connection, or exit the process.

    Missing connection parameters and a failed first connection are both
    fatal: they are logged and turned into ``SystemExit(1)``.
    """
    settings = settings or default_settings
    try:
        settings.require_database_settings()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc.message)
        raise SystemExit(1) from exc

    manager = ConnectionManager(settings.effective_database_url)
    try:
        await manager.acquire()
    except DatabaseConnectionError as exc:
        logger.error("Startup aborted: %s", exc.message)
        raise SystemExit(1) from exc

    return ProjectRepository(manager)
