"""Factory for creating prompt history backends."""

from typing import Any

from .base import PromptHistory


def create_prompt_history(
    backend: str = "memory",
    **kwargs: Any
) -> PromptHistory:
    """Create a prompt history backend.

    Args:
        backend: Backend type ("memory")
        **kwargs: Backend-specific configuration

    Returns:
        PromptHistory instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "memory":
        from .in_memory import InMemoryPromptHistory
        return InMemoryPromptHistory(**kwargs)

    raise ValueError(
        f"Unsupported history backend: {backend}. "
        f"Supported backends: memory"
    )
