"""Data models for a conversation session."""

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import ConfigDict, Field

from ..structuring.models import Category, WireModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MessageRole(str, Enum):
    """Who produced a turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(WireModel):
    """One immutable turn of a conversation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    role: MessageRole = Field(description="'user' or 'assistant'")
    content: str = Field(description="Text of the turn")
    timestamp: datetime = Field(default_factory=_utcnow)
    is_voice: bool = Field(default=False, description="Turn was transcribed from speech")


class HistoryEntry(WireModel):
    """A prior turn as supplied by a stateless caller."""

    role: MessageRole
    content: str


class ConversationState(WireModel):
    """Mutable state of one session, owned by its ConversationManager.

    ``raw_transcripts`` holds exactly one entry per user message, and
    ``is_complete`` never goes back to False once set.
    """

    messages: list[ChatMessage] = Field(default_factory=list)
    raw_transcripts: list[str] = Field(default_factory=list)
    combined_intent: Category = Field(default=Category.GENERAL)
    is_complete: bool = Field(default=False)
    clarifying_question: str | None = Field(default=None)


class TurnDecision(WireModel):
    """Outcome of evaluating one user turn."""

    model_config = ConfigDict(frozen=True)

    response_text: str = Field(description="Reply to show or speak to the user")
    should_structure: bool = Field(description="Enough information has been gathered")
    intent: Category = Field(default=Category.GENERAL, description="Intent of the combined input")
