"""Pytest configuration and shared fixtures."""
import asyncio
import json
from typing import Any

import pytest

from voiceprompt.config import PipelineConfig
from voiceprompt.llm.base import LLMProvider
from voiceprompt.llm.models import LLMMessage, LLMResponse
from voiceprompt.structuring import Category, PromptFields


class FakeLLMProvider(LLMProvider):
    """Scripted provider returning canned replies in order.

    A reply that is an Exception instance is raised instead of returned.
    Dicts and lists are serialized to JSON.
    """

    def __init__(self, replies: list[Any] | None = None, delay: float = 0.0):
        self.replies = list(replies or [])
        self.delay = delay
        self.calls: list[list[LLMMessage]] = []
        self.options: list[dict[str, Any]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        json_reply: bool = False,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append(list(messages))
        self.options.append({"temperature": temperature, "json_reply": json_reply, **kwargs})
        if self.delay:
            await asyncio.sleep(self.delay)

        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        if not isinstance(reply, str):
            reply = json.dumps(reply)
        return LLMResponse(content=reply, model=model or self.model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_llm_factory():
    """Return a factory that hands out one FakeLLMProvider per call.

    The created providers are recorded on ``factory.created``.
    """
    def make(replies: list[Any] | None = None, delay: float = 0.0):
        def factory(provider: str, **config: Any) -> FakeLLMProvider:
            llm = FakeLLMProvider(replies, delay)
            factory.created.append(llm)
            return llm

        factory.created = []
        return factory

    return make


@pytest.fixture
def hosted_config():
    """Return a config that enables hosted-model delegation."""
    return PipelineConfig(api_key="test-key", adapter_timeout=0.5)


@pytest.fixture
def code_request():
    """Return a single-utterance code request with a negated clause."""
    return (
        "Build me a REST API in Python with authentication, "
        "but don't use any paid services."
    )


@pytest.fixture
def long_plain_request():
    """Return a request of more than twenty words without negation."""
    return (
        "I want a friendly blog post about the history of coffee "
        "in Ethiopia and how coffee culture spread across the whole world "
        "over many centuries"
    )


@pytest.fixture
def bare_fields():
    """Return prompt fields with empty requirements and constraints."""
    return PromptFields(
        context="Summarize the meeting notes",
        intent=Category.WRITING,
        output_format="Well-structured written content",
    )


@pytest.fixture
def rich_fields():
    """Return prompt fields with requirements and constraints."""
    return PromptFields(
        context="Build a todo app",
        intent=Category.CODE_GENERATION,
        requirements=["It should sync across devices", "Include dark mode"],
        constraints=["Must use only free/open-source tools"],
        output_format="Complete, production-ready code with comments",
    )
