"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Deployment environment name. "development" adds
            stack traces to error responses.
        debug: Expose the interactive docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_login: Rate limit for the credential check endpoint.
        database_url: Explicit SQLAlchemy URL. Takes priority over postgres_*.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Userbase"
    version: str = "0.1.0"
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_login: str = "10/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "userbase"

    @property
    def is_development(self) -> bool:
        """True when running in development mode."""
        return self.environment.lower() == DEVELOPMENT

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a PostgreSQL URL from postgres_* values (Docker Compose, local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
