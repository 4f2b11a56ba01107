from .anthropic import AnthropicProvider
from .openai import DEEPSEEK_BASE_URL, OPENROUTER_BASE_URL, OpenAIProvider

__all__ = ["AnthropicProvider", "DEEPSEEK_BASE_URL", "OPENROUTER_BASE_URL", "OpenAIProvider"]
