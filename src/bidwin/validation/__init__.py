"""Response validation — agent envelopes to normalized results."""

from bidwin.validation.validator import (
    DEFAULT_GENERATION_WARNING,
    ResponseShape,
    ValidationOutcome,
    validate,
)

__all__ = ["DEFAULT_GENERATION_WARNING", "ResponseShape", "ValidationOutcome", "validate"]
