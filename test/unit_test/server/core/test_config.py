"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds environment variables through
their aliases and that the grouped configurations mirror them.
"""

import pytest

from unguka.server.core.config import API_V1_STR, PROJECT_NAME, CORSConfig, LoggingConfig, Settings


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_server_binding(self, monkeypatch):
        monkeypatch.setenv("UNGUKA_SERVER_HOST", "127.0.0.1")
        monkeypatch.setenv("UNGUKA_SERVER_PORT", "9100")

        settings = Settings()

        assert settings.server_host == "127.0.0.1"
        assert settings.server_port == 9100

    def test_database_binding(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./unguka.db")
        monkeypatch.setenv("CREATE_TABLES_ON_STARTUP", "true")

        settings = Settings()

        assert settings.database_url == "sqlite+aiosqlite:///./unguka.db"
        assert settings.create_tables_on_startup is True

    @pytest.mark.parametrize("value,expected", [("true", True), ("false", False), ("1", True), ("0", False)])
    def test_season_rollover_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("AUTO_CREATE_SEASONS_ON_STARTUP", value)

        assert Settings().auto_create_seasons_on_startup is expected

    def test_defaults(self, monkeypatch):
        for name in ("UNGUKA_SERVER_HOST", "UNGUKA_SERVER_PORT", "UNGUKA_LOG_LEVEL", "LOG_FORMAT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 8000
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ["*"]

    def test_populate_by_name(self):
        settings = Settings(server_port=8100, log_format="json")

        assert settings.server_port == 8100
        assert settings.log_format == "json"


class TestGroupedConfigs:
    """Test the computed configuration groups."""

    def test_cors_config(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://unguka.rw"]')
        monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", "false")

        cors = Settings().cors

        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["https://unguka.rw"]
        assert cors.allow_credentials is False
        assert cors.allow_methods == ["*"]

    def test_logging_config(self, monkeypatch):
        monkeypatch.setenv("UNGUKA_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("ENABLE_FILE_LOGGING", "true")

        logging_config = Settings().logging

        assert isinstance(logging_config, LoggingConfig)
        assert logging_config.level == "DEBUG"
        assert logging_config.format == "json"
        assert logging_config.enable_file is True
        assert logging_config.file_dir == "logs"


def test_constants():
    assert PROJECT_NAME == "Unguka"
    assert API_V1_STR == "/api/v1"
