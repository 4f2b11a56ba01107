from ..errors import UnknownTargetError
from ..structuring.models import PromptFields
from .base import PromptFormatter
from .models import FormattedPrompt
from .targets import (
    ChatGPTFormatter,
    ClaudeFormatter,
    DeepSeekFormatter,
    GeminiFormatter,
    GrokFormatter,
)

# Fixed output order of format_all
_FORMATTERS: tuple[PromptFormatter, ...] = (
    ClaudeFormatter(),
    GeminiFormatter(),
    ChatGPTFormatter(),
    DeepSeekFormatter(),
    GrokFormatter(),
)


def supported_targets() -> list[str]:
    """Names of all supported targets, in output order."""
    return [formatter.name for formatter in _FORMATTERS]


def get_formatter(target_name: str) -> PromptFormatter:
    """Look up a formatter by target name (case-insensitive).

    Raises:
        UnknownTargetError: If no supported target has that name
    """
    wanted = target_name.strip().lower()
    for formatter in _FORMATTERS:
        if formatter.name.lower() == wanted:
            return formatter
    raise UnknownTargetError(target_name, supported_targets())


def format_all(fields: PromptFields) -> list[FormattedPrompt]:
    """Render fields for every supported target, in fixed order."""
    return [formatter.format(fields) for formatter in _FORMATTERS]


def format_for(fields: PromptFields, target_name: str) -> FormattedPrompt:
    """Render fields for one named target."""
    return get_formatter(target_name).format(fields)
