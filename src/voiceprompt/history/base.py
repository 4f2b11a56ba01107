"""Abstract base class for prompt history backends.

The abstraction hides:
- Storage format and persistence mechanism
- Retention policy
"""

from abc import ABC, abstractmethod

from ..structuring.models import StructuredPrompt
from .models import SavedPrompt


class PromptHistory(ABC):
    """Abstract store of completed structured prompts."""

    @abstractmethod
    async def save(self, prompt: SavedPrompt) -> None:
        """Insert or replace a saved prompt."""

    @abstractmethod
    async def get(self, prompt_id: str) -> SavedPrompt | None:
        """Fetch one saved prompt by id."""

    @abstractmethod
    async def list_recent(self, limit: int | None = None) -> list[SavedPrompt]:
        """Saved prompts, newest first."""

    @abstractmethod
    async def delete(self, prompt_id: str) -> bool:
        """Delete a saved prompt. Returns False if it did not exist."""

    @abstractmethod
    async def clear(self) -> None:
        """Delete every saved prompt."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""

    async def search(self, query: str) -> list[SavedPrompt]:
        """Saved prompts whose title, transcript or intent contain query."""
        return [p for p in await self.list_recent() if p.matches(query)]

    async def record(
        self,
        prompt: StructuredPrompt,
        raw_transcript: str,
        locale: str
    ) -> SavedPrompt:
        """Save a freshly structured prompt."""
        saved = SavedPrompt(
            title=prompt.title,
            raw_transcript=raw_transcript,
            structured_prompt=prompt.full_prompt,
            intent=prompt.intent,
            quality_score=prompt.quality_score,
            locale=locale,
        )
        await self.save(saved)
        return saved
