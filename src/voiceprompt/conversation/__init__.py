"""Multi-turn conversation tracking.

Decides, turn by turn, whether to ask a clarifying question or declare
the request ready to structure.
"""

from .manager import ConversationManager
from .models import ChatMessage, ConversationState, HistoryEntry, MessageRole, TurnDecision
from .templates import CLARIFYING_QUESTIONS, EXHAUSTED_MESSAGE, READY_MESSAGE, WELCOME_MESSAGE

__all__ = [
    "CLARIFYING_QUESTIONS",
    "ChatMessage",
    "ConversationManager",
    "ConversationState",
    "EXHAUSTED_MESSAGE",
    "HistoryEntry",
    "MessageRole",
    "READY_MESSAGE",
    "TurnDecision",
    "WELCOME_MESSAGE",
]
