"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class, which is
built once at startup and passed explicitly to the app factory, the
dispatcher and the AI client.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also write daily log files under logs/
        official_email: Contact email echoed in every response envelope
        gemini_api_key: API key for Google Gemini (empty disables the AI key)
        llm_model: Gemini model identifier
        llm_temperature: Generation temperature
        llm_max_tokens: Maximum answer length in tokens
        llm_timeout_seconds: Upper bound on a single Gemini call
        host: Interface to bind
        port: Port to bind
        cors_origins: Origins allowed by the CORS middleware
        enable_audit_logging: Whether the request audit middleware is installed
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_to_file: bool

    # Envelope
    official_email: str

    # LLM settings
    gemini_api_key: str
    llm_model: str
    llm_temperature: float
    llm_max_tokens: int
    llm_timeout_seconds: float

    # Server settings
    host: str
    port: int
    cors_origins: Tuple[str, ...]
    enable_audit_logging: bool

    def ai_configured(self) -> bool:
        """Check if a Gemini credential is available."""
        return bool(self.gemini_api_key)


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).strip().lower() in ("1", "true", "yes", "on")


def _get_number(key: str, default: str, cast):
    raw = _get_env(key, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(
            f"Environment variable '{key}' must be a number, got '{raw}'"
        )


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    """
    Build a fresh Settings instance from the current environment.

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If required environment variables are missing or malformed
    """
    # GEMINI_KEY first, then the SDK's own GOOGLE_API_KEY
    gemini_api_key = os.environ.get("GEMINI_KEY") or os.environ.get("GOOGLE_API_KEY", "")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "BFHLService"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_to_file=_get_bool("LOG_TO_FILE", "true"),

        # Envelope
        official_email=_get_env("OFFICIAL_EMAIL"),

        # LLM
        gemini_api_key=gemini_api_key,
        llm_model=_get_env("LLM_MODEL", "gemini-2.0-flash"),
        llm_temperature=_get_number("LLM_TEMPERATURE", "0.0", float),
        llm_max_tokens=_get_number("LLM_MAX_TOKENS", "16", int),
        llm_timeout_seconds=_get_number("LLM_TIMEOUT_SECONDS", "30", float),

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=_get_number("PORT", "3000", int),
        cors_origins=_parse_origins(_get_env("CORS_ORIGINS", "*")),
        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; maxsize=1 ensures only one
    instance exists for the lifetime of the process.

    Raises:
        ValueError: If required environment variables are missing
    """
    return load_settings()
