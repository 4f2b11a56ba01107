import logging
from collections.abc import Callable
from typing import Any

from ..config import PipelineConfig
from ..llm.base import LLMProvider
from ..llm.factory import create_llm_provider
from .base import PromptStrategy
from .hosted import HostedModelStrategy
from .rule_based import RuleBasedStrategy

logger = logging.getLogger(__name__)


def select_strategy(
    config: PipelineConfig,
    credential: str | None = None,
    model_id: str | None = None,
    locale: str | None = None,
    llm_factory: Callable[..., LLMProvider] = create_llm_provider,
    **provider_kwargs: Any
) -> PromptStrategy:
    """Choose the strategy for one call.

    A credential on the call wins over the configured one. Without any
    credential the rule-based strategy is used. A provider that cannot
    even be constructed counts as an adapter failure and also yields the
    rule-based strategy.

    Args:
        config: Pipeline configuration
        credential: Per-call hosted model credential
        model_id: Per-call hosted model identifier
        locale: Per-call locale
        llm_factory: Provider factory (injectable for tests)
        **provider_kwargs: Extra provider configuration

    Returns:
        The strategy to answer the call with
    """
    fallback = RuleBasedStrategy()

    api_key = credential or config.api_key
    if not api_key:
        return fallback

    model = model_id or config.model_id
    try:
        llm = llm_factory(config.provider, api_key=api_key, model=model, **provider_kwargs)
    except (TypeError, ValueError) as e:
        logger.warning("Could not create %s provider, using rule-based strategy: %s", config.provider, e)
        return fallback

    logger.debug("Delegating to %s model %s", config.provider, model)
    return HostedModelStrategy(
        llm,
        fallback=fallback,
        timeout=config.adapter_timeout,
        locale=locale or config.locale,
        model=model,
    )
