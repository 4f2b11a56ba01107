"""Canned assistant lines and the clarifying question table."""

from ..structuring.models import Category

WELCOME_MESSAGE = "I'm listening! Tell me what prompt you'd like me to create, in any language."

READY_MESSAGE = (
    "Perfect! I have enough information. "
    "Let me structure that into an optimized prompt for you."
)

EXHAUSTED_MESSAGE = "Got it! Let me structure that into a prompt for you."

# Asked in order; a question already present in the session is skipped.
CLARIFYING_QUESTIONS: dict[Category, list[str]] = {
    Category.CODE_GENERATION: [
        "What programming language or framework would you like me to use?",
        "Should I include error handling and edge cases?",
        "Do you need tests included with the code?",
        "Any specific architecture pattern you'd like (MVC, microservices, etc.)?",
    ],
    Category.WRITING: [
        "What tone should the writing be: formal, casual, or conversational?",
        "Who is the target audience?",
        "How long should the content be?",
        "Should I include any specific sections or structure?",
    ],
    Category.ANALYSIS: [
        "What specific aspects should I focus on?",
        "Do you need data sources or citations?",
        "Should I compare multiple options or focus on one?",
        "What level of detail do you need: an overview or a deep dive?",
    ],
    Category.CREATIVE: [
        "What style or mood are you going for?",
        "Who is this for, and where will it be used?",
        "Do you have any references or examples you like?",
        "Are there colors, formats, or dimensions I should stick to?",
    ],
    Category.DATA: [
        "What format is the source data in (CSV, JSON, spreadsheet, etc.)?",
        "Where should the results end up: a file, a database, or a dashboard?",
        "Should this run once or on a schedule?",
        "Roughly how much data are we talking about?",
    ],
    Category.GENERAL: [
        "Could you tell me a bit more about what you're looking for?",
        "What's the main goal you want to achieve?",
        "Are there any specific requirements or constraints?",
    ],
}


def questions_for(category: Category) -> list[str]:
    return CLARIFYING_QUESTIONS.get(category, CLARIFYING_QUESTIONS[Category.GENERAL])
