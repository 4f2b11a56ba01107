from typing import Any

from .base import LLMProvider
from .providers import DEEPSEEK_BASE_URL, OPENROUTER_BASE_URL, AnthropicProvider, OpenAIProvider

SUPPORTED_PROVIDERS = ("openrouter", "openai", "deepseek", "anthropic")


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type ('openrouter', 'openai', 'deepseek', 'anthropic')
        **config: Provider-specific configuration
            For OpenRouter:
                - api_key: str (required)
                - model: str, an OpenRouter model id (default: 'openai/gpt-4o-mini')
            For OpenAI:
                - api_key: str (required)
                - model: str (default: 'gpt-4o-mini')
                - base_url: str | None
                - organization: str | None
            For DeepSeek:
                - api_key: str (required)
                - model: str (default: 'deepseek-chat')
            For Anthropic (Claude):
                - api_key: str (required)
                - model: str (default: 'claude-sonnet-4-20250514')
                - base_url: str | None

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_llm_provider(
        ...     "openrouter",
        ...     api_key="sk-or-...",
        ...     model="openai/gpt-4o-mini"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower not in SUPPORTED_PROVIDERS and provider_lower != "claude":
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: {', '.join(repr(p) for p in SUPPORTED_PROVIDERS)}"
        )

    if not config.get("api_key"):
        raise TypeError(f"{provider} provider requires 'api_key' in config")

    if provider_lower == "openrouter":
        config.setdefault("base_url", OPENROUTER_BASE_URL)
        config.setdefault("model", "openai/gpt-4o-mini")
        return OpenAIProvider(**config)

    if provider_lower == "deepseek":
        config.setdefault("base_url", DEEPSEEK_BASE_URL)
        config.setdefault("model", "deepseek-chat")
        return OpenAIProvider(**config)

    if provider_lower == "openai":
        return OpenAIProvider(**config)

    return AnthropicProvider(**config)
