"""Turn-by-turn state machine for one conversation session.

A session starts in the collecting state and moves to ready-to-structure
once the user has said enough (word count) or the exchange has gone on
long enough (message count). Until then every user turn gets a
clarifying question that has not been asked before in the session.
"""

import logging
from collections.abc import Iterable
from typing import Any

from ..structuring.classifier import IntentClassifier
from ..structuring.models import Category
from .models import ChatMessage, ConversationState, HistoryEntry, MessageRole, TurnDecision
from .templates import EXHAUSTED_MESSAGE, READY_MESSAGE, WELCOME_MESSAGE, questions_for

logger = logging.getLogger(__name__)

DEFAULT_WORD_THRESHOLD = 15
DEFAULT_TURN_CEILING = 4
TRANSCRIPT_SEPARATOR = ". "


class ConversationManager:
    """Owns the ConversationState of a single session.

    Usage:
        session = ConversationManager()
        decision = session.process_turn("Build me an app")
        if decision.should_structure:
            text = session.combined_transcript()
    """

    def __init__(
        self,
        word_threshold: int = DEFAULT_WORD_THRESHOLD,
        turn_ceiling: int = DEFAULT_TURN_CEILING,
        classifier: IntentClassifier | None = None
    ):
        self._word_threshold = word_threshold
        self._turn_ceiling = turn_ceiling
        self._classifier = classifier or IntentClassifier()
        self._state = ConversationState()

    @classmethod
    def from_history(
        cls,
        history: Iterable[HistoryEntry | dict[str, Any]],
        is_complete: bool = False,
        **kwargs: Any
    ) -> "ConversationManager":
        """Rebuild a session from prior ``{role, content}`` turns.

        Callers that tracked completion themselves pass ``is_complete``.
        Otherwise a history containing one of the rule-based readiness
        replies yields a completed session.
        """
        manager = cls(**kwargs)
        manager._state.is_complete = is_complete
        for raw in history:
            entry = raw if isinstance(raw, HistoryEntry) else HistoryEntry.model_validate(raw)
            if entry.role == MessageRole.USER:
                manager.add_user_turn(entry.content)
            else:
                manager.add_assistant_turn(entry.content)
                if entry.content in (READY_MESSAGE, EXHAUSTED_MESSAGE):
                    manager._state.is_complete = True
        return manager

    @property
    def state(self) -> ConversationState:
        """A snapshot of the session state."""
        return self._state.model_copy(deep=True)

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._state.messages)

    @property
    def is_complete(self) -> bool:
        return self._state.is_complete

    def welcome_message(self) -> str:
        return WELCOME_MESSAGE

    def add_user_turn(self, text: str, is_voice: bool = False) -> ChatMessage:
        message = ChatMessage(role=MessageRole.USER, content=text, is_voice=is_voice)
        self._state.messages.append(message)
        self._state.raw_transcripts.append(text)
        return message

    def add_assistant_turn(self, text: str) -> ChatMessage:
        message = ChatMessage(role=MessageRole.ASSISTANT, content=text)
        self._state.messages.append(message)
        return message

    def combined_transcript(self) -> str:
        """All user turns joined into one text."""
        return TRANSCRIPT_SEPARATOR.join(self._state.raw_transcripts)

    def asked_questions(self) -> set[str]:
        return {
            m.content for m in self._state.messages
            if m.role == MessageRole.ASSISTANT
        }

    def next_question(self, category: Category) -> str | None:
        """First template for the category not yet asked, or None if exhausted."""
        asked = self.asked_questions()
        for question in questions_for(category):
            if question not in asked:
                return question
        return None

    def _ready_with(self, text: str) -> bool:
        words = sum(len(t.split()) for t in self._state.raw_transcripts) + len(text.split())
        messages = len(self._state.messages) + 1
        return words > self._word_threshold or messages >= self._turn_ceiling

    def evaluate(self, text: str, category: Category | None = None) -> TurnDecision:
        """Decide how to answer a user turn without recording it.

        Args:
            text: The new user turn
            category: Intent to pick questions for; classified from the
                combined input when omitted

        Returns:
            The reply and whether the session is ready to structure
        """
        if category is None:
            combined = TRANSCRIPT_SEPARATOR.join([*self._state.raw_transcripts, text])
            category = self._classifier.classify(combined)

        if self._state.is_complete or self._ready_with(text):
            return TurnDecision(response_text=READY_MESSAGE, should_structure=True, intent=category)

        question = self.next_question(category)
        if question is None:
            return TurnDecision(response_text=EXHAUSTED_MESSAGE, should_structure=True, intent=category)

        return TurnDecision(response_text=question, should_structure=False, intent=category)

    def commit(self, text: str, decision: TurnDecision, is_voice: bool = False) -> TurnDecision:
        """Record a user turn and the reply chosen for it."""
        self.add_user_turn(text, is_voice)
        self.add_assistant_turn(decision.response_text)
        self._state.combined_intent = decision.intent

        if decision.should_structure:
            if not self._state.is_complete:
                logger.debug("Session ready to structure after %d messages", len(self._state.messages))
            self._state.is_complete = True
        else:
            self._state.clarifying_question = decision.response_text

        return decision

    def process_turn(
        self,
        text: str,
        category: Category | None = None,
        is_voice: bool = False
    ) -> TurnDecision:
        """Evaluate a user turn and record it together with the reply."""
        return self.commit(text, self.evaluate(text, category), is_voice)

    def reset(self) -> None:
        """Discard the session and start collecting again."""
        self._state = ConversationState()
