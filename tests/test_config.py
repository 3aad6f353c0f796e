import pytest
from pydantic import ValidationError

from ataxx.ai.constants import MAX_DEPTH
from ataxx.config import get_settings, load_settings

ENV_VARS = ["ATAXX_SEARCH_DEPTH", "ATAXX_SEED", "ATAXX_LOG_LEVEL",
            "ATAXX_LOG_FILE", "ATAXX_CORS_ORIGINS"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.search_depth == MAX_DEPTH
    assert settings.seed is None
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["*"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ATAXX_SEARCH_DEPTH", "3")
    monkeypatch.setenv("ATAXX_SEED", "99")
    monkeypatch.setenv("ATAXX_LOG_LEVEL", "debug")
    monkeypatch.setenv("ATAXX_CORS_ORIGINS", "http://a.example, http://b.example")
    settings = load_settings()
    assert settings.search_depth == 3
    assert settings.seed == 99
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.example", "http://b.example"]


def test_bad_values_rejected(monkeypatch):
    monkeypatch.setenv("ATAXX_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        load_settings()
    monkeypatch.setenv("ATAXX_LOG_LEVEL", "INFO")
    monkeypatch.setenv("ATAXX_SEARCH_DEPTH", "0")
    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_cached():
    assert get_settings() is get_settings()
