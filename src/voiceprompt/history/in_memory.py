"""In-memory prompt history backend.

Simple dict-based storage; data is lost when the application exits.
"""

from .base import PromptHistory
from .models import SavedPrompt


class InMemoryPromptHistory(PromptHistory):
    """In-memory prompt history (session-only).

    Keeps at most ``max_items`` prompts, evicting the oldest first.
    """

    def __init__(self, max_items: int = 50):
        self._max_items = max_items
        self._prompts: dict[str, SavedPrompt] = {}

    async def save(self, prompt: SavedPrompt) -> None:
        self._prompts.pop(prompt.id, None)
        self._prompts[prompt.id] = prompt
        while len(self._prompts) > self._max_items:
            oldest = min(self._prompts.values(), key=lambda p: p.timestamp)
            del self._prompts[oldest.id]

    async def get(self, prompt_id: str) -> SavedPrompt | None:
        return self._prompts.get(prompt_id)

    async def list_recent(self, limit: int | None = None) -> list[SavedPrompt]:
        # Insertion order breaks timestamp ties
        ordered = sorted(
            enumerate(self._prompts.values()),
            key=lambda pair: (pair[1].timestamp, pair[0]),
            reverse=True,
        )
        prompts = [p for _, p in ordered]
        return prompts[:limit] if limit is not None else prompts

    async def delete(self, prompt_id: str) -> bool:
        return self._prompts.pop(prompt_id, None) is not None

    async def clear(self) -> None:
        self._prompts.clear()

    @property
    def backend_type(self) -> str:
        return "memory"
