from .base import PromptFormatter
from .factory import format_all, format_for, get_formatter, supported_targets
from .models import FormattedPrompt
from .targets import (
    ChatGPTFormatter,
    ClaudeFormatter,
    DeepSeekFormatter,
    GeminiFormatter,
    GrokFormatter,
)

__all__ = [
    "ChatGPTFormatter",
    "ClaudeFormatter",
    "DeepSeekFormatter",
    "FormattedPrompt",
    "GeminiFormatter",
    "GrokFormatter",
    "PromptFormatter",
    "format_all",
    "format_for",
    "get_formatter",
    "supported_targets",
]
