"""Prompt history for completed structured prompts."""

from .base import PromptHistory
from .factory import create_prompt_history
from .in_memory import InMemoryPromptHistory
from .models import SavedPrompt

__all__ = [
    "InMemoryPromptHistory",
    "PromptHistory",
    "SavedPrompt",
    "create_prompt_history",
]
