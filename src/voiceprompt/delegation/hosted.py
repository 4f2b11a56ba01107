"""Hosted-model strategy with rule-based fallback.

Every call is attempted against the hosted model first. Transport
errors, timeouts, unparseable replies and payloads that fail validation
are all turned into AdapterError, logged, and answered by the fallback
strategy for that same call. A timed-out request is cancelled before
the fallback runs, so a late reply is never applied.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..conversation.manager import ConversationManager
from ..conversation.models import MessageRole, TurnDecision
from ..errors import AdapterError
from ..formatting.factory import get_formatter, supported_targets
from ..formatting.models import FormattedPrompt
from ..llm.base import LLMProvider
from ..llm.models import LLMMessage
from ..prompts import render_prompt
from ..structuring.engine import CONVERSATION_CONTEXT_PREFIX, assemble_full_prompt, build_context
from ..structuring.extractor import derive_title
from ..structuring.models import Category, PromptFields, StructuredPrompt, WireModel
from ..structuring.scoring import score_prompt
from .base import PromptStrategy
from .parsing import extract_json
from .rule_based import RuleBasedStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")

ADAPTER_TEMPERATURE = 0.3


class TurnPayload(WireModel):
    response: str = Field(min_length=1)
    should_structure: bool
    intent: Category = Category.GENERAL


class StructurePayload(WireModel):
    title: str
    intent: Category
    context: str = Field(min_length=1)
    requirements: list[str] = Field(default_factory=list)
    constraints: list[str] = Field(default_factory=list)
    output_format: str = Field(min_length=1)
    full_prompt: str | None = None
    quality_score: int | None = Field(default=None, ge=0, le=100)


class FormatPayload(WireModel):
    prompts: list[FormattedPrompt]


_FORMATTED_LIST = TypeAdapter(list[FormattedPrompt])


def _formatted(data: Any) -> list[FormattedPrompt]:
    # Replies come as {"prompts": [...]}; a bare list is accepted too
    if isinstance(data, list):
        return _FORMATTED_LIST.validate_python(data)
    return FormatPayload.model_validate(data).prompts


def _validate(adapter: Callable[[Any], T], data: Any) -> T:
    try:
        return adapter(data)
    except PydanticValidationError as e:
        raise AdapterError(f"Hosted model payload failed validation: {e}") from e


class HostedModelStrategy(PromptStrategy):
    """Strategy that delegates to a hosted LLM and falls back to rules.

    Hidden design decisions:
    - Instruction texts and reply contract of the hosted model
    - JSON extraction from free-form replies
    - Timeout and failure handling
    """

    def __init__(
        self,
        llm: LLMProvider,
        fallback: PromptStrategy | None = None,
        timeout: float = 30.0,
        locale: str = "en-US",
        model: str | None = None
    ):
        """Initialize the hosted strategy.

        Args:
            llm: Provider used to reach the hosted model
            fallback: Strategy answering calls the hosted model fails
            timeout: Seconds to wait for each hosted reply
            locale: Locale the hosted model should reply in
            model: Model identifier (None uses the provider's default)
        """
        self._llm = llm
        self._fallback = fallback or RuleBasedStrategy()
        self._timeout = timeout
        self._locale = locale
        self._model = model

    @property
    def strategy_type(self) -> str:
        return "hosted"

    def _instruction(self, name: str, **values: str) -> str:
        return render_prompt(name, locale=self._locale, **values)

    async def _ask(self, messages: list[LLMMessage]) -> Any:
        try:
            response = await asyncio.wait_for(
                self._llm.chat_completion(
                    messages,
                    model=self._model,
                    temperature=ADAPTER_TEMPERATURE,
                    json_reply=True,
                ),
                timeout=self._timeout,
            )
        except TimeoutError as e:
            raise AdapterError(f"Hosted model did not answer within {self._timeout}s") from e
        except Exception as e:
            raise AdapterError(f"Hosted model request failed: {e}") from e

        return extract_json(response.content)

    async def _attempt(
        self,
        operation: str,
        call: Callable[[], Awaitable[T]],
        fallback: Callable[[], Awaitable[T]]
    ) -> T:
        try:
            return await call()
        except AdapterError as e:
            logger.warning("Hosted %s failed, using rule-based result: %s", operation, e)
            return await fallback()

    async def decide_turn(self, session: ConversationManager, text: str) -> TurnDecision:
        if session.is_complete:
            return await self._fallback.decide_turn(session, text)

        async def call() -> TurnDecision:
            messages = [LLMMessage(role="system", content=self._instruction("converse"))]
            messages.extend(
                LLMMessage(role=m.role.value, content=m.content) for m in session.messages
            )
            messages.append(LLMMessage(role=MessageRole.USER.value, content=text))

            payload = _validate(TurnPayload.model_validate, await self._ask(messages))

            if not payload.should_structure and payload.response in session.asked_questions():
                raise AdapterError(f"Hosted model repeated a question: {payload.response!r}")

            return TurnDecision(
                response_text=payload.response,
                should_structure=payload.should_structure,
                intent=payload.intent,
            )

        return await self._attempt(
            "turn decision", call, lambda: self._fallback.decide_turn(session, text)
        )

    async def structure(self, text: str, from_conversation: bool = False) -> StructuredPrompt:
        async def call() -> StructuredPrompt:
            messages = [
                LLMMessage(role="system", content=self._instruction("structure")),
                LLMMessage(role="user", content=text),
            ]
            payload = _validate(StructurePayload.model_validate, await self._ask(messages))

            context = payload.context
            if from_conversation and not context.startswith(CONVERSATION_CONTEXT_PREFIX):
                context = build_context(context, from_conversation=True)

            full_prompt = payload.full_prompt or assemble_full_prompt(
                context, payload.requirements, payload.constraints, payload.output_format
            )
            quality_score = payload.quality_score
            if quality_score is None:
                quality_score = score_prompt(
                    text, payload.requirements, payload.constraints, payload.intent
                )

            return StructuredPrompt(
                title=derive_title(payload.title or text),
                intent=payload.intent,
                context=context,
                requirements=payload.requirements,
                constraints=payload.constraints,
                output_format=payload.output_format,
                full_prompt=full_prompt,
                quality_score=quality_score,
            )

        return await self._attempt(
            "structuring", call, lambda: self._fallback.structure(text, from_conversation)
        )

    async def format(
        self,
        fields: PromptFields,
        target_name: str | None = None
    ) -> list[FormattedPrompt]:
        # Resolve the target before delegating; unknown names are a client error
        targets = [get_formatter(target_name).name] if target_name else supported_targets()

        async def call() -> list[FormattedPrompt]:
            instruction = self._instruction(
                "format", targets="\n".join(f"- {name}" for name in targets)
            )
            messages = [
                LLMMessage(role="system", content=instruction),
                LLMMessage(role="user", content=fields.model_dump_json(by_alias=True, indent=2)),
            ]
            rendered = _validate(_formatted, await self._ask(messages))

            by_name = {item.target_name.strip().lower(): item for item in rendered}
            missing = [name for name in targets if name.lower() not in by_name]
            if missing:
                raise AdapterError(f"Hosted model omitted targets: {', '.join(missing)}")

            return [
                by_name[name.lower()].model_copy(update={"target_name": name})
                for name in targets
            ]

        return await self._attempt(
            "formatting", call, lambda: self._fallback.format(fields, target_name)
        )

    async def close(self) -> None:
        await self._llm.close()
