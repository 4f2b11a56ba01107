"""
Voiceprompt: turn spoken or typed requests into structured, model-specific prompts.

Each subpackage hides one design decision: the rule tables and
heuristics (structuring), the turn state machine (conversation), the
target templates (formatting), and whether a hosted model is consulted
(delegation).
"""

__version__ = "0.1.0"

from .config import PipelineConfig
from .conversation import ChatMessage, ConversationManager, ConversationState, TurnDecision
from .errors import AdapterError, UnknownTargetError, ValidationError, VoicePromptError
from .formatting import FormattedPrompt, format_all, format_for, supported_targets
from .pipeline import FormatRequest, PromptPipeline, StructureRequest, TurnRequest, TurnResponse
from .structuring import Category, PromptFields, StructuredPrompt, classify_intent, structure_prompt

__all__ = [
    "AdapterError",
    "Category",
    "ChatMessage",
    "ConversationManager",
    "ConversationState",
    "FormatRequest",
    "FormattedPrompt",
    "PipelineConfig",
    "PromptFields",
    "PromptPipeline",
    "StructureRequest",
    "StructuredPrompt",
    "TurnDecision",
    "TurnRequest",
    "TurnResponse",
    "UnknownTargetError",
    "ValidationError",
    "VoicePromptError",
    "classify_intent",
    "format_all",
    "format_for",
    "structure_prompt",
    "supported_targets",
]
