from abc import ABC, abstractmethod
from typing import Any

from ..conversation.manager import ConversationManager
from ..conversation.models import TurnDecision
from ..formatting.models import FormattedPrompt
from ..structuring.models import PromptFields, StructuredPrompt


class PromptStrategy(ABC):
    """Abstract base class for the three pipeline decision points.

    This module hides whether decisions come from the deterministic
    rule engines or from a hosted model. Implementations must never let
    a hosted-model failure escape: they answer every call, falling back
    to the rule-based result when needed.

    Supports async context manager protocol for resource cleanup:
        async with strategy:
            prompt = await strategy.structure(text)
    """

    @abstractmethod
    async def decide_turn(self, session: ConversationManager, text: str) -> TurnDecision:
        """Decide the reply to a new user turn without recording it.

        Args:
            session: The conversation the turn belongs to
            text: The new user turn

        Returns:
            Reply text, readiness flag and intent
        """

    @abstractmethod
    async def structure(self, text: str, from_conversation: bool = False) -> StructuredPrompt:
        """Structure text into a StructuredPrompt."""

    @abstractmethod
    async def format(
        self,
        fields: PromptFields,
        target_name: str | None = None
    ) -> list[FormattedPrompt]:
        """Render fields for every target, or only for target_name."""

    @property
    @abstractmethod
    def strategy_type(self) -> str:
        """Get the strategy type identifier."""

    async def close(self) -> None:
        """Release any resources held by the strategy."""

    async def __aenter__(self) -> "PromptStrategy":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
