from .models import (
    FormatRequest,
    StructureRequest,
    StructuringCompleted,
    TurnRequest,
    TurnResponse,
)
from .service import CompletionCallback, PromptPipeline

__all__ = [
    "CompletionCallback",
    "FormatRequest",
    "PromptPipeline",
    "StructureRequest",
    "StructuringCompleted",
    "TurnRequest",
    "TurnResponse",
]
