"""Rule-based structuring of free-form requests.

Hides the keyword tables, the classification policy, and the sentence
heuristics behind a small functional surface.
"""

from .classifier import IntentClassifier, classify_intent
from .engine import StructuringEngine, assemble_full_prompt, build_context, structure_prompt
from .extractor import (
    derive_output_format,
    derive_title,
    extract_constraints,
    extract_requirements,
    split_sentences,
)
from .models import Category, PromptFields, StructuredPrompt, WireModel
from .scoring import score_prompt

__all__ = [
    "Category",
    "IntentClassifier",
    "PromptFields",
    "StructuredPrompt",
    "StructuringEngine",
    "WireModel",
    "assemble_full_prompt",
    "build_context",
    "classify_intent",
    "derive_output_format",
    "derive_title",
    "extract_constraints",
    "extract_requirements",
    "score_prompt",
    "split_sentences",
    "structure_prompt",
]
