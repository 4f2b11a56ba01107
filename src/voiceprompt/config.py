"""Pipeline configuration.

A PipelineConfig value is passed explicitly to the pipeline's entry
points; nothing in the package reads settings from global state.
"""

import os

from pydantic import BaseModel, Field, field_validator

# Speech locales offered by the voice front end
SUPPORTED_LOCALES = (
    "te-IN", "en-US", "en-IN", "hi-IN", "ta-IN", "kn-IN", "ml-IN", "mr-IN", "bn-IN", "gu-IN",
    "es-ES", "fr-FR", "de-DE", "ja-JP", "ko-KR", "zh-CN", "ar-SA", "pt-BR", "ru-RU", "it-IT",
)

DEFAULT_LOCALE = "en-US"
DEFAULT_PROVIDER = "openrouter"
DEFAULT_MODEL_ID = "openai/gpt-4o-mini"


class PipelineConfig(BaseModel):
    """Settings for conversation thresholds and hosted-model delegation."""

    locale: str = Field(default=DEFAULT_LOCALE, description="Default speech/response locale")
    word_threshold: int = Field(
        default=15,
        ge=1,
        description="User word count beyond which a session is ready to structure"
    )
    turn_ceiling: int = Field(
        default=4,
        ge=1,
        description="Message count at which a session is ready to structure"
    )
    provider: str = Field(default=DEFAULT_PROVIDER, description="Hosted model provider")
    model_id: str = Field(default=DEFAULT_MODEL_ID, description="Hosted model identifier")
    api_key: str | None = Field(
        default=None,
        repr=False,
        description="Credential enabling hosted-model delegation"
    )
    adapter_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for the hosted model before falling back"
    )
    max_history_items: int = Field(default=50, ge=1, description="Prompts kept in history")

    @field_validator("locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        if value not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unsupported locale: {value}. Supported locales: {', '.join(SUPPORTED_LOCALES)}"
            )
        return value

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """Build a config from environment variables.

        Environment variables:
            VOICEPROMPT_LOCALE: Default locale (default: en-US)
            VOICEPROMPT_WORD_THRESHOLD: Readiness word threshold (default: 15)
            VOICEPROMPT_TURN_CEILING: Readiness message ceiling (default: 4)
            VOICEPROMPT_PROVIDER: openrouter, openai, deepseek or anthropic (default: openrouter)
            VOICEPROMPT_MODEL: Hosted model identifier (default: openai/gpt-4o-mini)
            VOICEPROMPT_API_KEY or OPENROUTER_API_KEY: Hosted model credential
            VOICEPROMPT_ADAPTER_TIMEOUT: Seconds before falling back (default: 30)
            VOICEPROMPT_HISTORY_SIZE: Prompts kept in history (default: 50)
        """
        return cls(
            locale=os.getenv("VOICEPROMPT_LOCALE", DEFAULT_LOCALE),
            word_threshold=int(os.getenv("VOICEPROMPT_WORD_THRESHOLD", "15")),
            turn_ceiling=int(os.getenv("VOICEPROMPT_TURN_CEILING", "4")),
            provider=os.getenv("VOICEPROMPT_PROVIDER", DEFAULT_PROVIDER),
            model_id=os.getenv("VOICEPROMPT_MODEL", DEFAULT_MODEL_ID),
            api_key=os.getenv("VOICEPROMPT_API_KEY") or os.getenv("OPENROUTER_API_KEY"),
            adapter_timeout=float(os.getenv("VOICEPROMPT_ADAPTER_TIMEOUT", "30")),
            max_history_items=int(os.getenv("VOICEPROMPT_HISTORY_SIZE", "50")),
        )
