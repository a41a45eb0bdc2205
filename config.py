import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

DEFAULT_PORT = 3001
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(RuntimeError):
    """Raised when a required environment variable is missing or invalid."""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    gemini_api_url: str
    gemini_api_key: str
    port: int = DEFAULT_PORT
    gemini_timeout: Optional[float] = None
    log_level: str = "INFO"


def _required(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"Environment variable {name} is required but not set")
    return value


def _optional_number(name: str, cast, default=None):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"Environment variable {name} must be a number, got {raw!r}")


def _log_level() -> str:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Environment variable LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def load_settings() -> Settings:
    """
    Read configuration from the environment (and .env, loaded on import).

    Required: GEMINI_API_URL, GEMINI_API_KEY
    Optional: PORT (3001), GEMINI_TIMEOUT (seconds, no timeout if unset), LOG_LEVEL (INFO)
    """
    return Settings(
        gemini_api_url=_required("GEMINI_API_URL"),
        gemini_api_key=_required("GEMINI_API_KEY"),
        port=_optional_number("PORT", int, DEFAULT_PORT),
        gemini_timeout=_optional_number("GEMINI_TIMEOUT", float),
        log_level=_log_level(),
    )
