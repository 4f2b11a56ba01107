"""Unit tests for target-model formatters."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from voiceprompt.errors import UnknownTargetError
from voiceprompt.formatting import (
    ChatGPTFormatter,
    ClaudeFormatter,
    DeepSeekFormatter,
    GeminiFormatter,
    GrokFormatter,
    PromptFormatter,
    format_all,
    format_for,
    get_formatter,
    supported_targets,
)
from voiceprompt.structuring import Category, PromptFields


class TestPromptFormatter:
    """Tests for PromptFormatter interface."""

    def test_formatter_is_abstract(self):
        """Test that PromptFormatter cannot be instantiated directly."""
        with pytest.raises(TypeError):
            PromptFormatter()  # type: ignore


class TestRegistry:
    """Tests for target lookup."""

    def test_supported_targets_order(self):
        """Test the fixed target order."""
        assert supported_targets() == ["Claude", "Gemini", "ChatGPT", "DeepSeek", "Grok"]

    @pytest.mark.parametrize("name", ["claude", "CHATGPT", " Grok "])
    def test_lookup_is_case_insensitive(self, name: str):
        """Test that target names match regardless of case and padding."""
        assert get_formatter(name).name.lower() == name.strip().lower()

    def test_unknown_target(self, rich_fields: PromptFields):
        """Test that unsupported targets raise UnknownTargetError."""
        with pytest.raises(UnknownTargetError) as exc_info:
            format_for(rich_fields, "Llama")

        assert exc_info.value.target == "Llama"
        assert "Claude" in str(exc_info.value)

    def test_format_all_order(self, rich_fields: PromptFields):
        """Test that format_all renders every target in fixed order."""
        outputs = format_all(rich_fields)

        assert [o.target_name for o in outputs] == supported_targets()
        assert all(o.description for o in outputs)

    def test_format_for_single_target(self, rich_fields: PromptFields):
        """Test rendering for one named target."""
        output = format_for(rich_fields, "deepseek")

        assert output.target_name == "DeepSeek"
        assert output.rendered_text == DeepSeekFormatter().render(rich_fields)

    def test_empty_lists_omit_sections(self, bare_fields: PromptFields):
        """Test that no target renders empty requirement or constraint sections."""
        for output in format_all(bare_fields):
            text = output.rendered_text.lower()
            assert "requirements" not in text
            assert "specifications" not in text
            assert "constraints" not in text

    @given(st.text(min_size=1, max_size=200), st.sampled_from(list(Category)))
    def test_context_always_present(self, context: str, intent: Category):
        """Property test: Every rendering contains the context verbatim."""
        fields = PromptFields(context=context, intent=intent)

        for output in format_all(fields):
            assert context in output.rendered_text


class TestClaudeFormatter:
    """Tests for the Claude template."""

    def test_tagged_sections(self, rich_fields: PromptFields):
        """Test that sections are wrapped in tags, in order."""
        text = ClaudeFormatter().render(rich_fields)

        tags = ["<task>", "<requirements>", "<constraints>", "<output_format>", "<instructions>"]
        positions = [text.index(tag) for tag in tags]
        assert positions == sorted(positions)
        assert "- Include dark mode" in text
        assert "step-by-step" in text

    def test_no_requirement_tags_when_empty(self, bare_fields: PromptFields):
        """Test that empty lists produce no tags."""
        text = ClaudeFormatter().render(bare_fields)

        assert "<requirements>" not in text
        assert "<constraints>" not in text


class TestGeminiFormatter:
    """Tests for the Gemini template."""

    def test_numbered_requirements(self, rich_fields: PromptFields):
        """Test that requirements are numbered and headers are bold."""
        text = GeminiFormatter().render(rich_fields)

        assert text.startswith("**Task:** Build a todo app")
        assert "1. It should sync across devices" in text
        assert "2. Include dark mode" in text
        assert "**Expected Output:** Complete, production-ready code with comments" in text
        assert "**Important:**" in text


class TestChatGPTFormatter:
    """Tests for the ChatGPT template."""

    def test_system_message_names_intent(self, rich_fields: PromptFields):
        """Test the system/user split and the intent specialization."""
        text = ChatGPTFormatter().render(rich_fields)

        assert text.startswith("[System Message]")
        assert "specializing in code generation" in text
        assert text.index("[System Message]") < text.index("[User Message]")
        assert "• Include dark mode" in text
        assert text.endswith("Please provide: Complete, production-ready code with comments")


class TestDeepSeekFormatter:
    """Tests for the DeepSeek template."""

    def test_reasoning_plan(self, rich_fields: PromptFields):
        """Test the problem statement, specifications and numbered plan."""
        text = DeepSeekFormatter().render(rich_fields)

        assert text.startswith("## Problem Statement\nBuild a todo app")
        assert "## Specifications\n- It should sync across devices" in text
        assert "1. First, analyze the problem" in text
        assert text.endswith("## Expected Output\nComplete, production-ready code with comments")


class TestGrokFormatter:
    """Tests for the Grok template."""

    def test_one_line_summaries(self, rich_fields: PromptFields):
        """Test that lists are joined on one line each."""
        text = GrokFormatter().render(rich_fields)

        assert "Key requirements: It should sync across devices; Include dark mode" in text
        assert "Constraints: Must use only free/open-source tools" in text
        assert text.endswith(
            "Be direct, thorough, and practical. Complete, production-ready code with comments."
        )

    def test_no_doubled_period(self):
        """Test that an output format ending in a period is not doubled."""
        fields = PromptFields(context="Hi", output_format="A list.")

        assert GrokFormatter().render(fields).endswith("practical. A list.")
