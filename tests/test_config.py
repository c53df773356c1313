"""Unit tests for environment configuration."""

from dataclasses import FrozenInstanceError

import pytest

from bfhl.core.config import load_settings


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("OFFICIAL_EMAIL", "a@b.c")
        for key in ("PORT", "LLM_MODEL", "LLM_TIMEOUT_SECONDS", "CORS_ORIGINS"):
            monkeypatch.delenv(key, raising=False)

        settings = load_settings()

        assert settings.official_email == "a@b.c"
        assert settings.port == 3000
        assert settings.llm_model == "gemini-2.0-flash"
        assert settings.llm_timeout_seconds == 30.0
        assert settings.cors_origins == ("*",)

    def test_missing_email(self, monkeypatch):
        monkeypatch.delenv("OFFICIAL_EMAIL", raising=False)

        with pytest.raises(ValueError, match="OFFICIAL_EMAIL"):
            load_settings()

    def test_bad_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "eighty")

        with pytest.raises(ValueError, match="PORT"):
            load_settings()

    def test_gemini_key_falls_back_to_google_api_key(self, monkeypatch):
        monkeypatch.setenv("GEMINI_KEY", "")
        monkeypatch.setenv("GOOGLE_API_KEY", "g-key")

        settings = load_settings()

        assert settings.gemini_api_key == "g-key"
        assert settings.ai_configured()

    def test_cors_origins_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

        assert load_settings().cors_origins == ("https://a.example", "https://b.example")

    def test_settings_are_immutable(self):
        settings = load_settings()

        with pytest.raises(FrozenInstanceError):
            settings.official_email = "other@example.com"
