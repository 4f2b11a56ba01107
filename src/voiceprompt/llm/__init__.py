from .base import LLMProvider
from .factory import SUPPORTED_PROVIDERS, create_llm_provider
from .models import LLMMessage, LLMResponse
from .providers import AnthropicProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "LLMMessage",
    "LLMResponse",
    "AnthropicProvider",
    "OpenAIProvider",
    "SUPPORTED_PROVIDERS",
]
