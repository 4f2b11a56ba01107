"""Templates for the supported target models.

Each template's literal section names and ordering are part of its
contract; consumers match on them.
"""

from ..structuring.models import PromptFields
from .base import PromptFormatter


class ClaudeFormatter(PromptFormatter):
    """Tag-delimited sections followed by a step-by-step instruction block."""

    name = "Claude"
    description = "Optimized with XML tags and structured thinking"

    def render(self, fields: PromptFields) -> str:
        lines = ["<task>", fields.context, "</task>", ""]

        if fields.requirements:
            lines.append("<requirements>")
            lines.extend(f"- {r}" for r in fields.requirements)
            lines.extend(["</requirements>", ""])

        if fields.constraints:
            lines.append("<constraints>")
            lines.extend(f"- {c}" for c in fields.constraints)
            lines.extend(["</constraints>", ""])

        lines.extend(["<output_format>", fields.output_format, "</output_format>", ""])
        lines.extend([
            "<instructions>",
            "Please think through this step-by-step before providing your response.",
            "Be thorough, follow best practices, and explain your reasoning.",
            "If anything is ambiguous, state your assumptions clearly.",
            "</instructions>",
        ])
        return "\n".join(lines)


class GeminiFormatter(PromptFormatter):
    """Bold markdown headers, numbered requirements, closing emphasis."""

    name = "Gemini"
    description = "Structured with markdown and grounding hints"

    def render(self, fields: PromptFields) -> str:
        lines = [f"**Task:** {fields.context}", ""]

        if fields.requirements:
            lines.append("**Requirements:**")
            lines.extend(f"{i}. {r}" for i, r in enumerate(fields.requirements, 1))
            lines.append("")

        if fields.constraints:
            lines.append("**Constraints:**")
            lines.extend(f"- {c}" for c in fields.constraints)
            lines.append("")

        lines.extend([
            f"**Expected Output:** {fields.output_format}",
            "",
            "**Important:** Provide a comprehensive, well-structured response. "
            "Use markdown formatting for clarity. Include code examples if relevant.",
        ])
        return "\n".join(lines)


class ChatGPTFormatter(PromptFormatter):
    """System and user segments; the system segment names the intent."""

    name = "ChatGPT"
    description = "System/User message split for GPT models"

    def render(self, fields: PromptFields) -> str:
        lines = [
            "[System Message]",
            f"You are an expert assistant specializing in {fields.intent.value.lower()}. "
            "Provide detailed, accurate, and well-structured responses. "
            "Follow best practices and industry standards.",
            "",
            "[User Message]",
            fields.context,
            "",
        ]

        if fields.requirements:
            lines.append("Requirements:")
            lines.extend(f"• {r}" for r in fields.requirements)
            lines.append("")

        if fields.constraints:
            lines.append("Constraints:")
            lines.extend(f"• {c}" for c in fields.constraints)
            lines.append("")

        lines.append(f"Please provide: {fields.output_format}")
        return "\n".join(lines)


class DeepSeekFormatter(PromptFormatter):
    """Problem statement, specifications and a numbered reasoning plan."""

    name = "DeepSeek"
    description = "Chain-of-thought with step-by-step reasoning"

    def render(self, fields: PromptFields) -> str:
        lines = ["## Problem Statement", fields.context, ""]

        if fields.requirements:
            lines.append("## Specifications")
            lines.extend(f"- {r}" for r in fields.requirements)
            lines.append("")

        if fields.constraints:
            lines.append("## Constraints")
            lines.extend(f"- {c}" for c in fields.constraints)
            lines.append("")

        lines.extend([
            "## Instructions",
            "1. First, analyze the problem and break it down into sub-problems",
            "2. Think through each sub-problem step by step",
            "3. Provide a complete, working solution",
            "4. Explain your reasoning and any trade-offs made",
            "",
            "## Expected Output",
            fields.output_format,
        ])
        return "\n".join(lines)


class GrokFormatter(PromptFormatter):
    """Context plus one-line summaries, then a directive to be direct."""

    name = "Grok"
    description = "Concise, direct, and to-the-point"

    def render(self, fields: PromptFields) -> str:
        lines = [fields.context, ""]

        if fields.requirements:
            lines.extend([f"Key requirements: {'; '.join(fields.requirements)}", ""])

        if fields.constraints:
            lines.extend([f"Constraints: {'; '.join(fields.constraints)}", ""])

        lines.append(f"Be direct, thorough, and practical. {fields.output_format.rstrip('.')}.")
        return "\n".join(lines)
