from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for records exchanged at the pipeline boundary.

    Attributes are snake_case in Python and camelCase on the wire;
    both spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Category(str, Enum):
    """Closed set of intent labels.

    Declaration order is the tie-break priority used by the classifier.
    GENERAL is the zero-signal default.
    """

    CODE_GENERATION = "Code Generation"
    WRITING = "Writing"
    ANALYSIS = "Analysis"
    CREATIVE = "Creative"
    DATA = "Data"
    GENERAL = "General"


class PromptFields(WireModel):
    """The structured fields a formatter reads."""

    model_config = ConfigDict(frozen=True)

    context: str = Field(description="What the user wants, in their words")
    intent: Category = Field(default=Category.GENERAL, description="Intent label")
    requirements: list[str] = Field(default_factory=list, description="Requirement sentences")
    constraints: list[str] = Field(default_factory=list, description="Constraint sentences")
    output_format: str = Field(default="Clear response", description="Expected output shape")


class StructuredPrompt(PromptFields):
    """A finalized, normalized prompt produced from one conversation."""

    title: str = Field(description="Short title derived from the opening words")
    full_prompt: str = Field(description="Sectioned prompt text ready to paste")
    quality_score: int = Field(ge=0, le=100, description="Heuristic completeness score")
