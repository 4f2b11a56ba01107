"""Additive completeness rubric for structured prompts.

The score is a proxy for how much detail the user supplied. It says
nothing about whether the request itself is sound.
"""

from .models import Category

BASE_SCORE = 40

# (minimum exclusive character count, bonus)
LENGTH_BONUSES = ((200, 10), (400, 10), (600, 5))

# (minimum exclusive requirement count, bonus)
REQUIREMENT_BONUSES = ((0, 10), (2, 5), (4, 5))

CONSTRAINT_BONUS = 5
INTENT_BONUS = 10
MAX_SCORE = 100


def score_prompt(
    text: str,
    requirements: list[str],
    constraints: list[str],
    intent: Category
) -> int:
    """Score a prompt from its source text length and extracted fields.

    Args:
        text: The source text the fields were extracted from
        requirements: Extracted requirements
        constraints: Extracted constraints
        intent: Classified intent

    Returns:
        Integer score in [0, 100]
    """
    score = BASE_SCORE

    length = len(text)
    score += sum(bonus for threshold, bonus in LENGTH_BONUSES if length > threshold)

    count = len(requirements)
    score += sum(bonus for threshold, bonus in REQUIREMENT_BONUSES if count > threshold)

    if constraints:
        score += CONSTRAINT_BONUS

    if intent != Category.GENERAL:
        score += INTENT_BONUS

    return max(0, min(score, MAX_SCORE))
