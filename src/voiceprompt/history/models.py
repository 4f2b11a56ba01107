"""Data models for prompt history.

Independent of the storage backend used.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import Field

from ..structuring.models import Category, WireModel


class SavedPrompt(WireModel):
    """A completed structured prompt kept for later reuse."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str = Field(description="Title of the structured prompt")
    raw_transcript: str = Field(description="Combined user transcript it was built from")
    structured_prompt: str = Field(description="The full prompt text")
    intent: Category = Field(description="Classified intent")
    quality_score: int = Field(ge=0, le=100)
    locale: str = Field(description="Locale the request was made in")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def matches(self, query: str) -> bool:
        """Case-insensitive match on title, transcript or intent."""
        needle = query.lower()
        return (
            needle in self.title.lower()
            or needle in self.raw_transcript.lower()
            or needle in self.intent.value.lower()
        )
