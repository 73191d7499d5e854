"""Settings 테스트."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from apps.users.setup.config import Settings, get_settings


class TestSettings:
    """Settings 클래스 테스트."""

    def test_default_settings(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.repository_backend == "postgres"
        assert settings.database_url.startswith("postgresql+asyncpg://")
        assert settings.database_create_schema is False
        assert settings.log_format == "json"
        assert settings.cors_origins == ["*"]

    def test_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "USERS_REPOSITORY_BACKEND": "memory",
                "USERS_LOG_LEVEL": "DEBUG",
                "USERS_LOG_FORMAT": "text",
                "USERS_DATABASE_POOL_SIZE": "10",
            },
        ):
            settings = Settings()

        assert settings.repository_backend == "memory"
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "text"
        assert settings.database_pool_size == 10

    def test_rejects_unknown_backend(self) -> None:
        with patch.dict(os.environ, {"USERS_REPOSITORY_BACKEND": "mongo"}):
            with pytest.raises(ValidationError):
                Settings()

    def test_get_settings_singleton(self) -> None:
        get_settings.cache_clear()

        assert get_settings() is get_settings()
