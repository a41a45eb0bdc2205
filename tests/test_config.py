import pytest
from pydantic import ValidationError

from config import DEFAULT_PORT, ConfigError, load_settings


def test_defaults(env):
    settings = load_settings()

    assert settings.gemini_api_key == "test-key"
    assert settings.port == DEFAULT_PORT == 3001
    assert settings.gemini_timeout is None
    assert settings.log_level == "INFO"


def test_optional_overrides(env):
    env.setenv("PORT", "8080")
    env.setenv("GEMINI_TIMEOUT", "30")
    env.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.port == 8080
    assert settings.gemini_timeout == 30.0
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name", ["GEMINI_API_URL", "GEMINI_API_KEY"])
def test_missing_required_is_fatal(env, name):
    env.delenv(name)

    with pytest.raises(ConfigError, match=name):
        load_settings()


def test_invalid_port(env):
    env.setenv("PORT", "eighty")

    with pytest.raises(ConfigError, match="PORT"):
        load_settings()


def test_settings_are_read_only(env):
    settings = load_settings()

    with pytest.raises(ValidationError):
        settings.port = 1


def test_invalid_log_level(env):
    env.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ConfigError, match="LOG_LEVEL"):
        load_settings()


def test_invalid_log_level_blocks_startup(env):
    from fastapi.testclient import TestClient
    from app import app

    env.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ConfigError):
        with TestClient(app):
            pass
