"""Strategy selection between rule-based engines and a hosted model."""

from .base import PromptStrategy
from .factory import select_strategy
from .hosted import HostedModelStrategy
from .parsing import extract_json
from .rule_based import RuleBasedStrategy

__all__ = [
    "HostedModelStrategy",
    "PromptStrategy",
    "RuleBasedStrategy",
    "extract_json",
    "select_strategy",
]
