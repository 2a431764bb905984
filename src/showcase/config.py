"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

from showcase.errors.exceptions import ConfigurationError

# Discrete connection parameters that must all be present before any
# operation is attempted.
REQUIRED_DATABASE_SETTINGS = ("db_host", "db_user", "db_password", "db_name")


class Settings(BaseSettings):
    # Database
    db_host: str | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_name: str | None = None
    database_url: str | None = None
    database_driver: str = "postgresql+asyncpg"

    # Logging
    log_level: str = "info"
    log_json: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def missing_database_settings(self) -> list[str]:
        """Return the environment variable names of unset connection parameters."""
        return [name.upper() for name in REQUIRED_DATABASE_SETTINGS if not getattr(self, name)]

    def require_database_settings(self) -> None:
        missing = self.missing_database_settings()
        if missing:
            raise ConfigurationError(
                f"{', '.join(missing)} not set in the environment or .env file",
                details={"missing": missing},
            )

    @property
    def effective_database_url(self) -> str:
        """Return the explicit connection string, or compose one from the parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            self.database_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            database=self.db_name,
        ).render_as_string(hide_password=False)


settings = Settings()
