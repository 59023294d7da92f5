"""Validation result models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Reported when the check digit could not be computed
NOT_APPLICABLE = "N/A"


class VinErrorCode(str, Enum):
    """Validation failure kinds, in detection order."""

    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"


class ValidationResult(BaseModel):
    """Outcome of validating a single VIN."""

    model_config = ConfigDict(frozen=True)

    vin: str = Field(..., description="Input after normalization")
    is_valid: bool
    errors: tuple[VinErrorCode, ...] = Field(default_factory=tuple)
    check_digit: str = Field(
        default="",
        description="Actual 9th character, empty if the VIN is shorter",
    )
    expected_check_digit: str = Field(
        default=NOT_APPLICABLE,
        description="Computed ISO 3779 check digit",
    )

    def has_error(self, code: VinErrorCode) -> bool:
        """Check if a specific error was recorded."""
        return code in self.errors

    @property
    def error_summary(self) -> str:
        """Comma-separated error codes, empty when valid."""
        return ", ".join(code.value for code in self.errors)

    def describe(self) -> str:
        """Return a one-line verdict for display."""
        if self.is_valid:
            return f"Valid VIN: {self.vin}"
        return (
            f"Invalid VIN: {self.error_summary} "
            f"(expected check digit: {self.expected_check_digit})"
        )
