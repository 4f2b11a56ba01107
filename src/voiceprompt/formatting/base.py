from abc import ABC, abstractmethod

from ..structuring.models import PromptFields
from .models import FormattedPrompt


class PromptFormatter(ABC):
    """Abstract base class for target-model prompt templates.

    This module hides each target's section vocabulary and ordering.
    Implementations must:
    - Read only the structured fields, never raw transcripts
    - Omit requirement and constraint sections when those lists are empty
    - Render deterministically, holding no state between calls
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Target label, unique among supported targets."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description of the template's style."""

    @abstractmethod
    def render(self, fields: PromptFields) -> str:
        """Render the prompt text for this target."""

    def format(self, fields: PromptFields) -> FormattedPrompt:
        return FormattedPrompt(
            target_name=self.name,
            description=self.description,
            rendered_text=self.render(fields),
        )
