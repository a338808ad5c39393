"""What a use case does when an external extraction step fails."""

from enum import Enum


class FallbackPolicy(str, Enum):
    # Continue with a structurally complete, empty result flagged as degraded
    PLACEHOLDER = "placeholder"
    # Re-raise the ExtractionError to the caller
    PROPAGATE = "propagate"
