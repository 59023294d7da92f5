"""Custom exceptions for vincheck."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from vincheck.models.results import ValidationResult


class VincheckError(Exception):
    """Base exception for all vincheck errors."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


# ─────────────────────────────────────────────────────────────────────────────
# Check Digit Errors
# ─────────────────────────────────────────────────────────────────────────────


class CheckDigitError(VincheckError, ValueError):
    """Base class for check digit precondition violations."""


class TransliterationError(CheckDigitError):
    """Character has no ISO 3779 transliteration value."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character '{character}' at position {position}",
            "VIN characters must be digits or letters other than I, O and Q.",
        )


class CheckDigitLengthError(CheckDigitError):
    """Check digit requested for a string that is not 17 characters."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Cannot compute check digit for {length} characters",
            "A VIN must be exactly 17 characters long.",
        )


# ─────────────────────────────────────────────────────────────────────────────
# Validation Errors
# ─────────────────────────────────────────────────────────────────────────────


class InvalidVINError(VincheckError, ValueError):
    """VIN failed validation in a context that expects a valid one."""

    def __init__(self, result: "ValidationResult") -> None:
        self.result = result
        super().__init__(result.describe(), result.error_summary)
