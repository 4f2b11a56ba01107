"""Unit tests for the quality score rubric."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from voiceprompt.structuring import Category, score_prompt
from voiceprompt.structuring.scoring import BASE_SCORE


class TestScorePrompt:
    """Tests for score_prompt."""

    def test_base_score(self):
        """Test that a bare General prompt scores the base value."""
        assert score_prompt("Hi", [], [], Category.GENERAL) == BASE_SCORE

    def test_intent_bonus(self):
        """Test that any non-General intent adds ten points."""
        assert score_prompt("Hi", [], [], Category.WRITING) == BASE_SCORE + 10

    def test_constraint_bonus(self):
        """Test that having constraints adds five points once."""
        assert score_prompt("Hi", [], ["a", "b", "c"], Category.GENERAL) == BASE_SCORE + 5

    @pytest.mark.parametrize("count,bonus", [
        (0, 0),
        (1, 10),
        (2, 10),
        (3, 15),
        (4, 15),
        (5, 20),
        (9, 20),
    ])
    def test_requirement_bonuses(self, count: int, bonus: int):
        """Test the stepped requirement bonus."""
        requirements = ["requirement"] * count

        assert score_prompt("Hi", requirements, [], Category.GENERAL) == BASE_SCORE + bonus

    @pytest.mark.parametrize("length,bonus", [
        (200, 0),
        (201, 10),
        (401, 20),
        (601, 25),
    ])
    def test_length_bonuses(self, length: int, bonus: int):
        """Test the stepped text length bonus."""
        assert score_prompt("x" * length, [], [], Category.GENERAL) == BASE_SCORE + bonus

    def test_maximum_reachable_score(self):
        """Test that every bonus together reaches exactly 100."""
        score = score_prompt("x" * 700, ["r"] * 5, ["c"], Category.CODE_GENERATION)

        assert score == 100

    @given(
        st.text(max_size=1000),
        st.lists(st.text(), max_size=10),
        st.lists(st.text(), max_size=10),
        st.sampled_from(list(Category)),
    )
    def test_score_is_bounded(self, text, requirements, constraints, intent):
        """Property test: Scores always fall within 0-100."""
        assert 0 <= score_prompt(text, requirements, constraints, intent) <= 100

    @given(st.text(max_size=1000), st.sampled_from(list(Category)))
    def test_more_requirements_never_lower_score(self, text, intent):
        """Property test: Adding a requirement never lowers the score."""
        fewer = score_prompt(text, ["a"], [], intent)
        more = score_prompt(text, ["a", "b", "c"], [], intent)

        assert more >= fewer
