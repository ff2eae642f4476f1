"""Domain-specific exceptions.

Custom exceptions provide better error handling and clearer intent
than generic exceptions.
"""


class DescriptionEngineError(Exception):
    """Base exception for all description engine errors."""


# ============================================================================
# Conversion Errors
# ============================================================================


class NotNumericError(DescriptionEngineError):
    """Raised when a weight/quantity string has no leading number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Not a numeric amount: {text!r}")
        self.text = text


class InvalidMultiplierError(DescriptionEngineError):
    """Raised when a weight is scaled by something other than a positive integer."""


# ============================================================================
# Record Errors
# ============================================================================


class InvalidDetailFieldError(DescriptionEngineError):
    """Raised when an unknown product detail field is addressed."""


# ============================================================================
# Synchronization Errors
# ============================================================================


class SyncStateError(DescriptionEngineError):
    """Raised when the description sync guard is entered twice."""
