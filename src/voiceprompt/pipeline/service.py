"""The three request/response boundaries of the prompt pipeline.

Each call validates its request, picks a strategy (hosted model when a
credential is available, rules otherwise), and returns a complete
answer. Only ValidationError and UnknownTargetError reach the caller.
"""

import logging
from collections.abc import Awaitable, Callable

from ..config import PipelineConfig
from ..conversation.manager import ConversationManager
from ..delegation.base import PromptStrategy
from ..delegation.factory import select_strategy
from ..errors import ValidationError
from ..formatting.factory import get_formatter
from ..formatting.models import FormattedPrompt
from ..llm.base import LLMProvider
from ..llm.factory import create_llm_provider
from ..structuring.models import StructuredPrompt
from .models import (
    FormatRequest,
    StructureRequest,
    StructuringCompleted,
    TurnRequest,
    TurnResponse,
)

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[StructuringCompleted], Awaitable[None]]


def _require_text(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(field)
    return value.strip()


class PromptPipeline:
    """Entry point for turn processing, structuring and formatting.

    Usage:
        pipeline = PromptPipeline(PipelineConfig.from_env())
        reply = await pipeline.process_turn(TurnRequest(transcript="Build me an app"))
        if reply.should_structure:
            prompt = await pipeline.structure(StructureRequest(transcript=...))
            outputs = await pipeline.format(FormatRequest(prompt=prompt))
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        llm_factory: Callable[..., LLMProvider] = create_llm_provider
    ):
        """Initialize the pipeline.

        Args:
            config: Pipeline configuration (defaults apply when omitted)
            llm_factory: Hosted model provider factory
        """
        self._config = config or PipelineConfig()
        self._llm_factory = llm_factory
        self._subscribers: list[CompletionCallback] = []

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def new_session(self) -> ConversationManager:
        """Start a conversation session using the configured thresholds."""
        return ConversationManager(
            word_threshold=self._config.word_threshold,
            turn_ceiling=self._config.turn_ceiling,
        )

    def subscribe(self, callback: CompletionCallback) -> None:
        """Register an async callback for StructuringCompleted events."""
        self._subscribers.append(callback)

    def _strategy(
        self,
        credential: str | None,
        model_id: str | None,
        locale: str | None = None
    ) -> PromptStrategy:
        return select_strategy(
            self._config,
            credential=credential,
            model_id=model_id,
            locale=locale,
            llm_factory=self._llm_factory,
        )

    async def advance(
        self,
        session: ConversationManager,
        transcript: str,
        credential: str | None = None,
        model_id: str | None = None,
        locale: str | None = None,
        is_voice: bool = False
    ) -> TurnResponse:
        """Process one user turn of a stateful session.

        Exactly one decision, hosted or rule-based, is recorded in the
        session per turn.

        Raises:
            ValidationError: If transcript is blank
        """
        text = _require_text(transcript, "transcript")

        async with self._strategy(credential, model_id, locale) as strategy:
            decision = await strategy.decide_turn(session, text)

        session.commit(text, decision, is_voice)
        return TurnResponse(
            response_text=decision.response_text,
            should_structure=decision.should_structure,
            intent=decision.intent,
            is_complete=session.is_complete,
        )

    async def process_turn(self, request: TurnRequest) -> TurnResponse:
        """Process one user turn of a stateless caller.

        The session is rebuilt from ``request.conversation_history``.

        Raises:
            ValidationError: If the transcript is blank
        """
        _require_text(request.transcript, "transcript")
        session = ConversationManager.from_history(
            request.conversation_history,
            is_complete=request.is_complete,
            word_threshold=self._config.word_threshold,
            turn_ceiling=self._config.turn_ceiling,
        )
        return await self.advance(
            session,
            request.transcript,
            credential=request.credential,
            model_id=request.model_id,
            locale=request.locale,
            is_voice=request.is_voice,
        )

    async def structure(self, request: StructureRequest) -> StructuredPrompt:
        """Structure a transcript and notify subscribers.

        Raises:
            ValidationError: If the transcript is blank
        """
        text = _require_text(request.transcript, "transcript")
        locale = request.locale or self._config.locale

        async with self._strategy(request.credential, request.model_id, locale) as strategy:
            prompt = await strategy.structure(text, request.from_conversation)

        logger.info("Structured %r as %s (score %d)", prompt.title, prompt.intent.value, prompt.quality_score)
        await self._publish(StructuringCompleted(prompt=prompt, transcript=text, locale=locale))
        return prompt

    async def format(self, request: FormatRequest) -> list[FormattedPrompt]:
        """Render a structured prompt for all targets or one named target.

        Raises:
            ValidationError: If the prompt or its context is missing
            UnknownTargetError: If target_name is not a supported target
        """
        if request.prompt is None:
            raise ValidationError("prompt", "prompt data is required")
        _require_text(request.prompt.context, "prompt.context")

        target_name = (request.target_name or "").strip() or None
        if target_name:
            get_formatter(target_name)

        async with self._strategy(request.credential, request.model_id) as strategy:
            return await strategy.format(request.prompt, target_name)

    async def _publish(self, event: StructuringCompleted) -> None:
        for callback in self._subscribers:
            try:
                await callback(event)
            except Exception:
                # Subscribers are collaborators; their failures never reach the caller
                logger.exception("Structuring-complete subscriber %r failed", callback)
