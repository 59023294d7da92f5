"""vincheck - ISO 3779 Vehicle Identification Number validation."""

from vincheck.core import assert_valid, compute_check_digit, is_valid, normalize, validate
from vincheck.exceptions import (
    CheckDigitError,
    CheckDigitLengthError,
    InvalidVINError,
    TransliterationError,
    VincheckError,
)
from vincheck.models import (
    NOT_APPLICABLE,
    VIN,
    VIN_LENGTH,
    ValidationResult,
    VinErrorCode,
    VINStr,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Operations
    "assert_valid",
    "compute_check_digit",
    "is_valid",
    "normalize",
    "validate",
    # Models
    "NOT_APPLICABLE",
    "VIN",
    "VIN_LENGTH",
    "VINStr",
    "ValidationResult",
    "VinErrorCode",
    # Exceptions
    "CheckDigitError",
    "CheckDigitLengthError",
    "InvalidVINError",
    "TransliterationError",
    "VincheckError",
]
