from pathlib import Path

import pytest
from pydantic import ValidationError

from woke_or_not.catalog.store import DEFAULT_LIMIT
from woke_or_not.config import DEFAULT_SECTION_LIMIT, Settings


def test_defaults(monkeypatch):
    for var in ("WOKE_SECTION_LIMIT", "WOKE_DATA_FILE", "WOKE_ALLOWED_ORIGINS", "WOKE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings()
    assert settings.SECTION_LIMIT == 5
    assert settings.DATA_FILE is None
    assert settings.cors_origins == ["*"]
    assert settings.LOG_LEVEL == "INFO"


def test_values_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("WOKE_SECTION_LIMIT", "3")
    monkeypatch.setenv("WOKE_DATA_FILE", str(tmp_path / "entities.json"))
    monkeypatch.setenv("woke_allowed_origins", "http://a.test, http://b.test,")
    settings = Settings()
    assert settings.SECTION_LIMIT == 3
    assert settings.DATA_FILE == Path(tmp_path / "entities.json")
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_empty_origins_disable_cors():
    assert Settings(ALLOWED_ORIGINS="").cors_origins == []


def test_log_level_is_normalised():
    assert Settings(LOG_LEVEL=" warning ").LOG_LEVEL == "WARNING"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="verbose")


def test_store_and_settings_share_the_section_limit(monkeypatch):
    monkeypatch.delenv("WOKE_SECTION_LIMIT", raising=False)
    assert DEFAULT_LIMIT == DEFAULT_SECTION_LIMIT == Settings().SECTION_LIMIT
