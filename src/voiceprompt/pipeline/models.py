"""Request and response shapes of the pipeline boundaries."""

from pydantic import ConfigDict, Field

from ..conversation.models import HistoryEntry
from ..structuring.models import Category, PromptFields, StructuredPrompt, WireModel


class TurnRequest(WireModel):
    """Input of the turn-processing boundary."""

    transcript: str = Field(description="The new user turn")
    conversation_history: list[HistoryEntry] = Field(
        default_factory=list,
        description="Prior turns of the session, oldest first"
    )
    credential: str | None = Field(default=None, repr=False)
    model_id: str | None = None
    locale: str | None = None
    is_voice: bool = False
    is_complete: bool = Field(
        default=False,
        description="Whether an earlier turn already readied the session for structuring"
    )


class TurnResponse(WireModel):
    """Output of the turn-processing boundary."""

    model_config = ConfigDict(frozen=True)

    response_text: str
    should_structure: bool
    intent: Category
    is_complete: bool


class StructureRequest(WireModel):
    """Input of the structuring boundary."""

    transcript: str = Field(description="Single utterance or combined transcript")
    from_conversation: bool = Field(
        default=False,
        description="The transcript joins several conversation turns"
    )
    locale: str | None = None
    credential: str | None = Field(default=None, repr=False)
    model_id: str | None = None


class FormatRequest(WireModel):
    """Input of the formatting boundary."""

    prompt: PromptFields | None = Field(default=None, description="Structured fields to render")
    target_name: str | None = Field(default=None, description="Restrict output to one target")
    credential: str | None = Field(default=None, repr=False)
    model_id: str | None = None


class StructuringCompleted(WireModel):
    """Event emitted after a prompt has been structured."""

    model_config = ConfigDict(frozen=True)

    prompt: StructuredPrompt
    transcript: str
    locale: str
