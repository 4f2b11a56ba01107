from ..conversation.manager import ConversationManager
from ..conversation.models import TurnDecision
from ..formatting.factory import format_all, format_for
from ..formatting.models import FormattedPrompt
from ..structuring.engine import StructuringEngine
from ..structuring.models import PromptFields, StructuredPrompt
from .base import PromptStrategy


class RuleBasedStrategy(PromptStrategy):
    """Deterministic strategy backed by the local rule engines.

    This is the availability guarantee of the pipeline: it needs no
    credential and never fails on non-empty text.
    """

    def __init__(self, engine: StructuringEngine | None = None):
        self._engine = engine or StructuringEngine()

    async def decide_turn(self, session: ConversationManager, text: str) -> TurnDecision:
        return session.evaluate(text)

    async def structure(self, text: str, from_conversation: bool = False) -> StructuredPrompt:
        return self._engine.structure(text, from_conversation)

    async def format(
        self,
        fields: PromptFields,
        target_name: str | None = None
    ) -> list[FormattedPrompt]:
        if target_name:
            return [format_for(fields, target_name)]
        return format_all(fields)

    @property
    def strategy_type(self) -> str:
        return "rule-based"
