"""Error taxonomy for the prompt pipeline.

Only ValidationError and UnknownTargetError ever reach a caller.
AdapterError is raised inside the hosted-model strategy and always
recovered there by the rule-based fallback.
"""


class VoicePromptError(Exception):
    """Base class for all voiceprompt errors."""


class ValidationError(VoicePromptError):
    """A required text field was missing or blank."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} is required")


class UnknownTargetError(VoicePromptError):
    """Formatting was requested for a target that is not supported."""

    def __init__(self, target: str, supported: list[str]):
        self.target = target
        self.supported = supported
        super().__init__(
            f"Unknown target: {target}. "
            f"Supported targets: {', '.join(supported)}"
        )


class AdapterError(VoicePromptError):
    """The hosted model failed, timed out, or returned an unusable payload."""
