"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from users_api.config import Settings


def test_settings_read_connection_string_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ATLAS_URL", "mongodb://db.example:27017/app")
    monkeypatch.delenv("DATABASE_NAME", raising=False)

    settings = Settings()

    assert settings.atlas_url == "mongodb://db.example:27017/app"
    assert settings.database_name is None
    assert settings.log_level == "INFO"


def test_settings_require_connection_string(monkeypatch) -> None:
    monkeypatch.delenv("ATLAS_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
