"""Anthropic Claude LLM provider implementation.

Uses the official Anthropic Python SDK for async chat completions.
Reference: https://github.com/anthropics/anthropic-sdk-python
"""

from typing import Any

from anthropic import AsyncAnthropic

from ..base import LLMProvider
from ..models import LLMMessage, LLMResponse

DEFAULT_MAX_TOKENS = 4096

# Opening of a JSON object, sent as the start of the assistant turn
JSON_PREFILL = "{"


class AnthropicProvider(LLMProvider):
    """Anthropic Claude LLM provider implementation.

    Hidden design decisions:
    - Anthropic API client initialization
    - System text placement and turn alternation
    - JSON replies through an assistant prefill
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        base_url: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize Anthropic provider.

        Args:
            api_key: Anthropic API key
            model: Default model to use
            base_url: Optional custom API base URL
            **client_kwargs: Additional kwargs for AsyncAnthropic client
        """
        self._model = model
        self._client = AsyncAnthropic(
            api_key=api_key,
            base_url=base_url,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def chat_completion(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        json_reply: bool = False,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion using Anthropic Claude.

        The Messages API has no JSON mode. With ``json_reply`` the turn is
        prefilled with an opening brace, which the returned content starts
        with again.
        """
        system, turns = _to_anthropic(messages)
        prefill = JSON_PREFILL if json_reply and turns and turns[-1]["role"] == "user" else ""
        if prefill:
            turns.append({"role": "assistant", "content": prefill})

        request_params: dict[str, Any] = {
            "model": model or self._model,
            "messages": turns,
            "temperature": temperature,
            "max_tokens": max_tokens or DEFAULT_MAX_TOKENS,
            **kwargs
        }
        if system:
            request_params["system"] = system

        response = await self._client.messages.create(**request_params)

        text = "".join(block.text for block in response.content if block.type == "text")
        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.input_tokens,
                "completion_tokens": response.usage.output_tokens,
                "total_tokens": response.usage.input_tokens + response.usage.output_tokens
            }

        return LLMResponse(content=prefill + text, model=response.model, usage=usage)

    async def close(self) -> None:
        """Close the Anthropic client."""
        await self._client.close()


def _to_anthropic(messages: list[LLMMessage]) -> tuple[str, list[dict[str, str]]]:
    """Split out system text and merge consecutive turns of the same role.

    Anthropic takes instructions in a separate ``system`` field and expects
    user and assistant turns to alternate.
    """
    system_parts: list[str] = []
    turns: list[dict[str, str]] = []
    for msg in messages:
        if msg.role == "system":
            system_parts.append(msg.content)
        elif turns and turns[-1]["role"] == msg.role:
            turns[-1]["content"] += "\n\n" + msg.content
        else:
            turns.append({"role": msg.role, "content": msg.content})
    return "\n\n".join(system_parts), turns
