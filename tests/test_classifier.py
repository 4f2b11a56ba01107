"""Unit tests for intent classification and the keyword tables."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from voiceprompt.structuring import Category, IntentClassifier, classify_intent
from voiceprompt.structuring.rules import CATEGORY_KEYWORDS, KeywordSet, normalize_text


class TestKeywordSet:
    """Tests for keyword matching."""

    def test_ascii_phrases_match_on_word_boundaries(self):
        """Test that a keyword inside another word does not match."""
        keywords = KeywordSet(["app"])

        assert keywords.any_match("Build an app")
        assert not keywords.any_match("I am happy")

    def test_inflections_only_when_enabled(self):
        """Test that inflected forms match only with inflect=True."""
        assert KeywordSet(["build"], inflect=True).any_match("She is building it")
        assert not KeywordSet(["build"]).any_match("She is building it")

    def test_weight_is_token_count(self):
        """Test that multi-word phrases weigh their token count."""
        keywords = KeywordSet(["rest api", "api"])

        assert keywords.score("Create a REST API") == 2
        assert keywords.score("Create a REST API and a GraphQL API") == 3

    def test_phrase_inside_longer_phrase_is_not_counted(self):
        """Test that a keyword found only within a longer keyword is dropped."""
        keywords = KeywordSet(["rest api", "api"])

        assert keywords.matches("Create a REST API") == ["rest api"]
        assert keywords.matches("An API and a REST API") == ["rest api", "api"]

    def test_non_ascii_phrases_accept_attached_suffixes(self):
        """Test that inflected Indic phrases match with a suffix attached."""
        keywords = KeywordSet(["कोड"], inflect=True)

        assert keywords.any_match("मुझे कोडिंग चाहिए")

    @pytest.mark.parametrize("text", [
        "मुझे कम कीमत वाला ऐप चाहिए",
        "मैं सहमत हूँ",
        "इसका मतलब समझाओ",
    ])
    def test_non_ascii_phrases_start_a_token(self, text: str):
        """Test that an Indic phrase inside another word does not match."""
        assert not KeywordSet(["मत"]).any_match(text)

    def test_non_ascii_phrase_as_whole_token(self):
        """Test that an Indic phrase matches when it stands alone."""
        keywords = KeywordSet(["मत"])

        assert keywords.any_match("विज्ञापन मत डालो")
        assert keywords.any_match("मत, कृपया")

    def test_curly_apostrophes_are_normalized(self):
        """Test that typographic apostrophes match ASCII keywords."""
        keywords = KeywordSet(["don't"])

        assert keywords.any_match("Please don’t do that")
        assert normalize_text("Don’t") == "don't"


class TestIntentClassifier:
    """Tests for the best-score classifier."""

    def test_code_request(self, code_request: str):
        """Test that a REST API request is Code Generation."""
        assert classify_intent(code_request) == Category.CODE_GENERATION

    @pytest.mark.parametrize("text,expected", [
        ("Write an essay about climate change", Category.WRITING),
        ("Analyze the survey results and compare trends", Category.ANALYSIS),
        ("Design a logo for my bakery brand", Category.CREATIVE),
        ("Automate my CSV export workflow", Category.DATA),
        ("Hi", Category.GENERAL),
        ("Help", Category.GENERAL),
    ])
    def test_categories(self, text: str, expected: Category):
        """Test one representative request per category."""
        assert classify_intent(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("Quiero un ensayo sobre la historia", Category.WRITING),
        ("एक वेबसाइट बनाओ", Category.CODE_GENERATION),
        ("ఒక కవిత రాయండి", Category.WRITING),
    ])
    def test_localized_keywords(self, text: str, expected: Category):
        """Test that Spanish, Hindi and Telugu keywords classify."""
        assert classify_intent(text) == expected

    def test_empty_text_is_general(self):
        """Test that text without signal falls back to General."""
        assert classify_intent("") == Category.GENERAL

    @pytest.mark.parametrize("text", ["ఆటోమేట్ చేయండి", "ఆటోమేట్"])
    def test_shared_prefix_counts_the_longer_keyword(self, text: str):
        """Test that a short keyword sharing a prefix does not steal the match."""
        scores = IntentClassifier().scores(text)

        assert scores[Category.CREATIVE] == 0
        assert scores[Category.DATA] == 1
        assert classify_intent(text) == Category.DATA

    def test_shadowing_across_categories(self):
        """Test that a keyword inside another category's phrase is dropped."""
        classifier = IntentClassifier({
            Category.CODE_GENERATION: ["write code"],
            Category.WRITING: ["write"],
        })

        assert classifier.scores("write code") == {
            Category.CODE_GENERATION: 2,
            Category.WRITING: 0,
        }
        assert classifier.scores("write code and write notes")[Category.WRITING] == 1

    def test_ties_go_to_priority_order(self):
        """Test that equal scores resolve to the earlier category."""
        classifier = IntentClassifier({
            Category.WRITING: ["alpha"],
            Category.DATA: ["beta"],
        })

        assert classifier.classify("alpha beta") == Category.WRITING
        assert classifier.classify("beta") == Category.DATA

    def test_highest_score_wins_over_priority(self):
        """Test that a stronger later category beats a weaker earlier one."""
        classifier = IntentClassifier({
            Category.CODE_GENERATION: ["code"],
            Category.CREATIVE: ["logo", "brand"],
        })

        assert classifier.classify("code a logo for the brand") == Category.CREATIVE

    def test_scores_are_in_priority_order(self):
        """Test that scores() lists every non-General category in order."""
        scores = IntentClassifier().scores("write code")

        assert list(scores) == [c for c in Category if c != Category.GENERAL]

    def test_general_has_no_keyword_table(self):
        """Test that General is only ever the zero-signal default."""
        assert Category.GENERAL not in CATEGORY_KEYWORDS

    @given(st.text(max_size=200))
    def test_classification_is_total(self, text: str):
        """Property test: Any text classifies to a known category."""
        assert classify_intent(text) in Category

    @given(st.text(max_size=200))
    def test_classification_is_deterministic(self, text: str):
        """Property test: The same text always gets the same label."""
        assert classify_intent(text) == classify_intent(text)
