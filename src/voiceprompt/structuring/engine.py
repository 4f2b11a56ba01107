from .classifier import IntentClassifier
from .extractor import (
    derive_output_format,
    derive_title,
    extract_constraints,
    extract_requirements,
)
from .models import StructuredPrompt
from .scoring import score_prompt

CONVERSATION_CONTEXT_PREFIX = "Based on our conversation, the user wants: "

GUIDELINES = [
    "Be thorough and detailed in your response",
    "Follow best practices and conventions",
    "Provide explanations for important decisions",
    "If anything is unclear, state your assumptions",
]


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def assemble_full_prompt(
    context: str,
    requirements: list[str],
    constraints: list[str],
    output_format: str
) -> str:
    """Join the prompt sections, separated by blank lines.

    Requirements and Constraints are left out entirely when empty.
    """
    sections = [f"## Task\n{context}"]

    if requirements:
        sections.append(f"## Requirements\n{_bullets(requirements)}")

    if constraints:
        sections.append(f"## Constraints\n{_bullets(constraints)}")

    sections.append(f"## Expected Output\n{output_format}")
    sections.append(f"## Guidelines\n{_bullets(GUIDELINES)}")

    return "\n\n".join(sections)


def build_context(text: str, from_conversation: bool = False) -> str:
    return f"{CONVERSATION_CONTEXT_PREFIX}{text}" if from_conversation else text


class StructuringEngine:
    """Rule-based composition of classifier, extractor and scorer.

    The engine holds no state between calls: the same text always
    produces the same StructuredPrompt.
    """

    def __init__(self, classifier: IntentClassifier | None = None):
        self._classifier = classifier or IntentClassifier()

    def structure(self, text: str, from_conversation: bool = False) -> StructuredPrompt:
        """Structure raw or combined text into a StructuredPrompt.

        Args:
            text: Single utterance or combined conversation transcript
            from_conversation: True when text joins several user turns

        Returns:
            The structured prompt
        """
        intent = self._classifier.classify(text)
        requirements = extract_requirements(text)
        constraints = extract_constraints(text)
        output_format = derive_output_format(intent, text)
        context = build_context(text, from_conversation)

        return StructuredPrompt(
            title=derive_title(text),
            intent=intent,
            context=context,
            requirements=requirements,
            constraints=constraints,
            output_format=output_format,
            full_prompt=assemble_full_prompt(context, requirements, constraints, output_format),
            quality_score=score_prompt(text, requirements, constraints, intent),
        )


_default_engine = StructuringEngine()


def structure_prompt(text: str, from_conversation: bool = False) -> StructuredPrompt:
    """Structure text with the default engine."""
    return _default_engine.structure(text, from_conversation)
