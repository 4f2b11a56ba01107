"""Unit tests for pipeline configuration."""
import pytest
from pydantic import ValidationError as PydanticValidationError

from voiceprompt.config import DEFAULT_LOCALE, SUPPORTED_LOCALES, PipelineConfig


class TestPipelineConfig:
    """Tests for PipelineConfig."""

    def test_defaults(self):
        """Test the default thresholds and provider."""
        config = PipelineConfig()

        assert config.locale == DEFAULT_LOCALE
        assert config.word_threshold == 15
        assert config.turn_ceiling == 4
        assert config.provider == "openrouter"
        assert not config.has_credential

    def test_unsupported_locale(self):
        """Test that unknown locales fail validation."""
        with pytest.raises(PydanticValidationError, match="Unsupported locale"):
            PipelineConfig(locale="xx-XX")

    @pytest.mark.parametrize("locale", ["te-IN", "hi-IN", "es-ES"])
    def test_supported_locales(self, locale: str):
        """Test that the voice front end's locales are accepted."""
        assert PipelineConfig(locale=locale).locale in SUPPORTED_LOCALES

    def test_api_key_hidden_from_repr(self):
        """Test that the credential never appears in repr."""
        assert "secret" not in repr(PipelineConfig(api_key="secret"))

    def test_from_env(self, monkeypatch):
        """Test reading every setting from the environment."""
        monkeypatch.setenv("VOICEPROMPT_LOCALE", "hi-IN")
        monkeypatch.setenv("VOICEPROMPT_WORD_THRESHOLD", "20")
        monkeypatch.setenv("VOICEPROMPT_TURN_CEILING", "6")
        monkeypatch.setenv("VOICEPROMPT_PROVIDER", "anthropic")
        monkeypatch.setenv("VOICEPROMPT_MODEL", "claude-sonnet-4-20250514")
        monkeypatch.setenv("VOICEPROMPT_API_KEY", "key")
        monkeypatch.setenv("VOICEPROMPT_ADAPTER_TIMEOUT", "5")
        monkeypatch.setenv("VOICEPROMPT_HISTORY_SIZE", "10")

        config = PipelineConfig.from_env()

        assert config.locale == "hi-IN"
        assert config.word_threshold == 20
        assert config.turn_ceiling == 6
        assert config.provider == "anthropic"
        assert config.model_id == "claude-sonnet-4-20250514"
        assert config.has_credential
        assert config.adapter_timeout == 5.0
        assert config.max_history_items == 10

    def test_openrouter_key_fallback(self, monkeypatch):
        """Test that OPENROUTER_API_KEY is used when no dedicated key is set."""
        monkeypatch.delenv("VOICEPROMPT_API_KEY", raising=False)
        monkeypatch.setenv("OPENROUTER_API_KEY", "or-key")

        assert PipelineConfig.from_env().api_key == "or-key"
