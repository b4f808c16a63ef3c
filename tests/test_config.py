"""
Tests for application settings and logging setup.
"""

import logging

import pytest

from userbase.core.config import Settings
from userbase.shared.logging import configure_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.environment == "production"
        assert settings.is_development is False
        assert settings.rate_limit_login == "10/minute"

    @pytest.mark.parametrize("environment", ["development", "Development", "DEVELOPMENT"])
    def test_is_development(self, environment: str) -> None:
        assert Settings(_env_file=None, environment=environment).is_development

    def test_explicit_database_url_wins(self) -> None:
        settings = Settings(_env_file=None, database_url="sqlite://", postgres_host="db")
        assert settings.get_database_url() == "sqlite://"

    def test_database_url_built_from_postgres_values(self) -> None:
        settings = Settings(
            _env_file=None,
            database_url=None,
            postgres_user="svc",
            postgres_password="secret",
            postgres_host="db",
            postgres_port=6543,
            postgres_db="accounts",
        )

        assert settings.get_database_url() == (
            "postgresql+psycopg2://svc:secret@db:6543/accounts"
        )

    def test_reads_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("RATE_LIMIT_LOGIN", "3/minute")

        settings = Settings(_env_file=None)

        assert settings.is_development
        assert settings.rate_limit_login == "3/minute"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_root_level(self) -> None:
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_means_info(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_given_loggers(self) -> None:
        configure_logging("INFO", quiet_loggers={"noisy.library": logging.ERROR})
        assert logging.getLogger("noisy.library").level == logging.ERROR
