"""Sentence-level heuristics that pull structured fields out of raw text.

Every function here is total: any string, including an empty one,
produces a result without raising.
"""

import re

from .models import Category
from .rules import (
    CANNED_CONSTRAINTS,
    EXPLAINED_CODE_FORMAT,
    NEGATION_SIGNALS,
    OUTPUT_FORMATS,
    REQUIREMENT_SIGNALS,
    normalize_text,
)

# Sentence terminators, including the Devanagari danda
_SENTENCE_BOUNDARY = re.compile(r"[.!?।]+")

MIN_SENTENCE_LENGTH = 5
TITLE_WORDS = 8
TITLE_MAX_LENGTH = 50


def split_sentences(text: str) -> list[str]:
    """Split text on sentence terminators, dropping empty pieces."""
    pieces = (piece.strip() for piece in _SENTENCE_BOUNDARY.split(text))
    return [piece for piece in pieces if piece]


def _substantial(sentences: list[str]) -> list[str]:
    return [s for s in sentences if len(s) > MIN_SENTENCE_LENGTH]


def extract_requirements(text: str) -> list[str]:
    """Extract requirement sentences.

    Sentences carrying a requirement signal ("need", "should", "with", ...)
    are kept. When none does, every substantial sentence is treated as an
    implicit requirement, so the result is non-empty whenever the text
    holds at least one sentence longer than five characters.
    """
    sentences = _substantial(split_sentences(text))
    requirements = [s for s in sentences if REQUIREMENT_SIGNALS.any_match(s)]
    return requirements or sentences


def extract_constraints(text: str) -> list[str]:
    """Extract negated sentences verbatim, then append canned constraints.

    Canned constraints are triggered by substrings anywhere in the text
    ("free", "simple", "fast", "secure", ...) and each appears at most once.
    """
    constraints = [
        s for s in _substantial(split_sentences(text))
        if NEGATION_SIGNALS.any_match(s)
    ]

    lowered = normalize_text(text)
    for triggers, constraint in CANNED_CONSTRAINTS:
        if any(trigger in lowered for trigger in triggers):
            constraints.append(constraint)

    return constraints


def derive_title(text: str) -> str:
    """First eight words, truncated to 47 characters plus an ellipsis past 50."""
    title = " ".join(text.split()[:TITLE_WORDS])
    if len(title) > TITLE_MAX_LENGTH:
        return title[:TITLE_MAX_LENGTH - 3] + "..."
    return title


def derive_output_format(category: Category, text: str | None = None) -> str:
    """Look up the expected output shape for a category.

    Code requests that ask for an explanation get the annotated variant.
    """
    if category == Category.CODE_GENERATION and text and "explain" in normalize_text(text):
        return EXPLAINED_CODE_FORMAT
    return OUTPUT_FORMATS.get(category, OUTPUT_FORMATS[Category.GENERAL])
