"""
Catalog API — Settings Tests
=============================

What:  Tests for the pydantic-settings configuration layer.
"""

import pytest
from pydantic import ValidationError

from catalog_api.config import Settings


class TestSettings:

    def test_log_level_is_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_is_sqlite(self):
        assert Settings(database_url="sqlite+aiosqlite:///./x.db").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@h/db").is_sqlite

    def test_pool_size_bounds(self):
        with pytest.raises(ValidationError):
            Settings(db_pool_size=1)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BACKEND_PORT", "9001")
        monkeypatch.setenv("DB_CREATE_TABLES", "false")

        settings = Settings()

        assert settings.backend_port == 9001
        assert settings.db_create_tables is False
