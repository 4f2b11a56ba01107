from pydantic import ConfigDict, Field

from ..structuring.models import WireModel


class FormattedPrompt(WireModel):
    """A structured prompt rendered for one target model."""

    model_config = ConfigDict(frozen=True)

    target_name: str = Field(description="Target model label, e.g. 'Claude'")
    description: str = Field(description="What the template optimizes for")
    rendered_text: str = Field(description="The prompt text to paste into the target")
