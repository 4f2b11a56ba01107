"""Keyword rule tables shared by the classifier and the field extractor.

This is the only place category keywords and signal words are defined.
Each table carries English terms followed by Spanish, Hindi and Telugu
variants so that transcripts from the supported speech locales classify
without translation.
"""

import re
from collections.abc import Iterable
from typing import NamedTuple, TypeVar

from .models import Category

T = TypeVar("T")

# Inflections accepted after an ASCII keyword ("build" -> "builds", "building")
_INFLECTIONS = r"(?:s|es|d|ed|ing)?"

# Characters that delimit a token in scripts where \b is unreliable
_SEPARATORS = r"\s.,!?;:।\"'()\[\]/-"
_TOKEN_START = rf"(?<![^{_SEPARATORS}])"
_TOKEN_END = rf"(?![^{_SEPARATORS}])"


def normalize_text(text: str) -> str:
    """Lower-case text and fold typographic apostrophes to ASCII."""
    return text.lower().replace("’", "'").replace("‘", "'")


class KeywordMatch(NamedTuple):
    """A phrase found in a text, with the spans it occupies."""

    phrase: str
    weight: int
    spans: tuple[tuple[int, int], ...]


def _inside(span: tuple[int, int], other: tuple[int, int]) -> bool:
    return (
        other[0] <= span[0]
        and span[1] <= other[1]
        and other[1] - other[0] > span[1] - span[0]
    )


def drop_shadowed(found: Iterable[tuple[T, KeywordMatch]]) -> list[tuple[T, KeywordMatch]]:
    """Drop matches that only occur inside a longer match.

    "ఆట" found solely within "ఆటోమేట్", or "api" solely within "rest api",
    does not count on its own. Items keep their order and labels.
    """
    found = list(found)
    spans = [span for _, match in found for span in match.spans]
    return [
        (label, match) for label, match in found
        if any(not any(_inside(span, other) for other in spans) for span in match.spans)
    ]


def _compile(phrase: str, inflect: bool) -> re.Pattern[str]:
    escaped = re.escape(phrase)
    if phrase.isascii():
        suffix = _INFLECTIONS if inflect else ""
        return re.compile(rf"\b{escaped}{suffix}\b")
    # Indic keywords are anchored at a token start; inflected sets accept
    # attached suffixes ("कोड" -> "कोडिंग"), the others must end the token
    return re.compile(rf"{_TOKEN_START}{escaped}" + ("" if inflect else _TOKEN_END))


class KeywordSet:
    """An ordered set of keyword phrases with match weights.

    ASCII phrases match on word boundaries (optionally with inflections).
    Non-ASCII phrases must start a token, since \\b is not reliable in
    Indic scripts. A phrase weighs its token count, and a phrase found
    only inside a longer phrase of the same set is not counted.
    """

    def __init__(self, phrases: list[str], inflect: bool = False):
        self._entries: list[tuple[str, int, re.Pattern[str]]] = []
        for phrase in phrases:
            phrase = normalize_text(phrase)
            self._entries.append((phrase, len(phrase.split()), _compile(phrase, inflect)))

    @property
    def phrases(self) -> list[str]:
        return [phrase for phrase, _, _ in self._entries]

    def find(self, text: str) -> list[KeywordMatch]:
        """Every phrase occurring in text, in table order, without shadowing."""
        lowered = normalize_text(text)
        found = []
        for phrase, weight, pattern in self._entries:
            spans = tuple(m.span() for m in pattern.finditer(lowered))
            if spans:
                found.append((phrase, KeywordMatch(phrase, weight, spans)))
        return [match for _, match in drop_shadowed(found)]

    def matches(self, text: str) -> list[str]:
        """Return the phrases found in text, in table order."""
        return [match.phrase for match in self.find(text)]

    def score(self, text: str) -> int:
        """Sum of weights of all phrases found in text."""
        return sum(match.weight for match in self.find(text))

    def any_match(self, text: str) -> bool:
        return bool(self.find(text))


CATEGORY_KEYWORDS: dict[Category, list[str]] = {
    Category.CODE_GENERATION: [
        "code", "program", "function", "api", "app", "application", "build", "create",
        "develop", "implement", "write code", "script", "website", "web", "database",
        "backend", "frontend", "full stack", "fullstack", "rest api", "endpoint",
        "component", "class", "module", "library", "package", "crud", "authentication",
        "login", "signup", "deploy", "server", "client", "mobile", "react", "next.js",
        "python", "javascript", "typescript", "java", "node", "express", "django",
        "flask", "html", "css", "sql", "mongodb", "firebase", "docker", "kubernetes",
        "fix", "debug", "bug", "crash", "troubleshoot", "refactor", "not working",
        # es
        "código", "programa", "aplicación", "sitio web", "base de datos", "función",
        # hi
        "कोड", "प्रोग्राम", "ऐप", "वेबसाइट", "बनाओ", "बनाएं",
        # te
        "కోడ్", "ప్రోగ్రామ్", "యాప్", "వెబ్‌సైట్", "తయారు చేయండి",
    ],
    Category.WRITING: [
        "write", "writing", "essay", "article", "blog", "post", "email", "letter",
        "report", "documentation", "readme", "story", "poem", "speech", "presentation",
        "proposal", "resume", "cover letter", "content", "copy", "social media",
        "tweet", "caption", "headline", "description", "summary", "translate",
        # es
        "escribir", "ensayo", "artículo", "correo", "carta", "historia",
        # hi
        "लिखो", "लिखें", "लिखना", "निबंध", "लेख", "कहानी", "कविता",
        # te
        "రాయండి", "రాయి", "వ్యాసం", "కథ", "కవిత", "ఉత్తరం",
    ],
    Category.ANALYSIS: [
        "analyze", "analyse", "analysis", "research", "compare", "evaluate", "review",
        "assess", "investigate", "study", "examine", "explain", "understand", "learn",
        "teach", "data", "statistics", "trend", "insight", "survey",
        # es
        "analizar", "análisis", "investigar", "comparar", "explicar", "datos",
        # hi
        "विश्लेषण", "तुलना", "समझाओ", "शोध", "डेटा",
        # te
        "విశ్లేషణ", "పోల్చండి", "వివరించండి", "పరిశోధన", "డేటా",
    ],
    Category.CREATIVE: [
        "design", "ui", "ux", "logo", "brand", "color", "layout", "mockup",
        "wireframe", "prototype", "animation", "illustration", "image", "video",
        "music", "game", "idea", "brainstorm", "creative", "innovate",
        # es
        "diseño", "diseñar", "logotipo", "juego", "música",
        # hi
        "डिज़ाइन", "डिजाइन", "लोगो", "खेल", "विचार",
        # te
        "డిజైన్", "లోగో", "ఆట", "ఆలోచన",
    ],
    Category.DATA: [
        "automate", "automation", "workflow", "pipeline", "etl", "scrape", "crawl",
        "parse", "extract", "transform", "csv", "json", "xml", "excel", "spreadsheet",
        "dashboard", "chart", "graph", "visualization", "bot", "cron",
        # es
        "automatizar", "hoja de cálculo", "gráfico",
        # hi
        "स्वचालित", "स्प्रेडशीट",
        # te
        "ఆటోమేట్", "స్ప్రెడ్‌షీట్",
    ],
}

REQUIREMENT_SIGNALS = KeywordSet([
    "need", "want", "should", "must", "include", "add", "with", "plus", "also", "feature",
    # es
    "necesito", "quiero", "debe", "incluir", "incluye", "con", "también",
    # hi
    "चाहिए", "ज़रूरत", "जरूरत", "साथ",
    # te
    "కావాలి", "అవసరం",
])

NEGATION_SIGNALS = KeywordSet([
    "no", "don't", "dont", "do not", "without", "avoid", "avoiding", "never",
    # es
    "sin", "nunca", "evitar", "evita",
    # hi
    "नहीं", "बिना", "मत",
    # te
    "వద్దు", "లేకుండా",
])

# Substring triggers checked against the whole text, each mapped to the
# constraint it appends. Order is the order constraints are emitted in.
CANNED_CONSTRAINTS: list[tuple[tuple[str, ...], str]] = [
    (
        ("free", "gratis", "gratuito", "मुफ्त", "मुफ़्त", "ఉచిత"),
        "Must use only free/open-source tools",
    ),
    (
        ("simple", "sencillo", "सरल", "సులభ"),
        "Keep the solution simple and straightforward",
    ),
    (
        ("fast", "quick", "rápido", "rapido", "तेज़", "तेज", "వేగ"),
        "Optimize for speed and performance",
    ),
    (
        ("secure", "security", "seguro", "seguridad", "सुरक्षित", "సురక్షిత"),
        "Follow security best practices",
    ),
]

OUTPUT_FORMATS: dict[Category, str] = {
    Category.CODE_GENERATION: "Complete, production-ready code with comments",
    Category.WRITING: "Well-structured written content",
    Category.ANALYSIS: "Detailed analysis with key findings and recommendations",
    Category.CREATIVE: "Creative output with reasoning behind design choices",
    Category.DATA: "Implementation with sample data and usage instructions",
    Category.GENERAL: "Clear, comprehensive response",
}

EXPLAINED_CODE_FORMAT = "Code with detailed comments and explanation"
