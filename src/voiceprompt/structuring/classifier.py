from .models import Category
from .rules import CATEGORY_KEYWORDS, KeywordSet, drop_shadowed


class IntentClassifier:
    """Best-score keyword classifier over the closed category set.

    Every category's keywords are matched against the text and their
    weights (token counts) summed. A keyword found only inside a longer
    keyword of any category does not count, so "ఆట" inside "ఆటోమేట్"
    scores for Data alone. The strictly highest score wins, ties
    go to the category declared first in ``Category``, and text with no
    matches at all is ``Category.GENERAL``.
    """

    def __init__(self, keywords: dict[Category, list[str]] | None = None):
        table = keywords if keywords is not None else CATEGORY_KEYWORDS
        self._rules: list[tuple[Category, KeywordSet]] = [
            (category, KeywordSet(table[category], inflect=True))
            for category in Category
            if category in table and category is not Category.GENERAL
        ]

    def scores(self, text: str) -> dict[Category, int]:
        """Score text against every category, in priority order."""
        found = drop_shadowed(
            (category, match) for category, rules in self._rules for match in rules.find(text)
        )
        totals = {category: 0 for category, _ in self._rules}
        for category, match in found:
            totals[category] += match.weight
        return totals

    def classify(self, text: str) -> Category:
        best = Category.GENERAL
        best_score = 0
        for category, score in self.scores(text).items():
            if score > best_score:
                best = category
                best_score = score
        return best


_default_classifier = IntentClassifier()


def classify_intent(text: str) -> Category:
    """Classify text with the default rule tables."""
    return _default_classifier.classify(text)
