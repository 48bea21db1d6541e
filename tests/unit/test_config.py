"""Unit tests for prompt_expander.llm.provider_config."""

import pytest

from prompt_expander.llm.provider_config import (
    DEFAULT_PROVIDER,
    MAX_TOKENS,
    TEMPERATURE,
    ProviderSettings,
    key_env_name,
    load_key,
    load_settings,
)


class TestLoadSettings:
    def test_defaults_to_openai(self):
        settings = load_settings(environ={})

        assert DEFAULT_PROVIDER == "openai"
        assert settings.name == "openai"
        assert settings.model == "gpt-3.5-turbo-0125"
        assert settings.api_key == ""
        assert settings.temperature == TEMPERATURE == 0.8
        assert settings.max_tokens == MAX_TOKENS == 350
        assert settings.timeout == 60.0

    def test_provider_from_environment(self):
        settings = load_settings(environ={"PROVIDER": "Gemini", "GEMINI_API_KEY": "g"})

        assert settings.name == "gemini"
        assert settings.api_key == "g"
        assert settings.url.endswith("/models/gemini-1.5-flash:generateContent")

    def test_explicit_provider_wins(self):
        settings = load_settings("openai", environ={"PROVIDER": "gemini"})
        assert settings.name == "openai"

    def test_model_override_applies_to_url(self):
        settings = load_settings("gemini", environ={"MODEL_NAME": "gemini-2.0-flash"})

        assert settings.model == "gemini-2.0-flash"
        assert "gemini-2.0-flash:generateContent" in settings.url

    def test_timeout_override(self):
        assert load_settings(environ={"LLM_TIMEOUT": "5"}).timeout == 5.0

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider: mistral"):
            load_settings("mistral", environ={})

    def test_credential_only_for_active_provider(self):
        settings = load_settings("openai", environ={"GEMINI_API_KEY": "g"})
        assert settings.api_key == ""

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("PROVIDER", "gemini")
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        monkeypatch.delenv("MODEL_NAME", raising=False)
        monkeypatch.delenv("LLM_TIMEOUT", raising=False)

        settings = load_settings()
        assert settings.name == "gemini"
        assert settings.api_key == "from-env"

    def test_settings_are_frozen(self):
        settings = load_settings(environ={})
        with pytest.raises(Exception):
            settings.api_key = "x"
        assert isinstance(settings, ProviderSettings)


class TestKeys:
    def test_key_env_name(self):
        assert key_env_name("openai") == "OPENAI_API_KEY"
        assert key_env_name("gemini") == "GEMINI_API_KEY"

    def test_load_key_missing(self):
        assert load_key("openai", environ={}) == ""
