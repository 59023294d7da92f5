"""Core services for vincheck."""

from vincheck.core.checkdigit import compute_check_digit
from vincheck.core.normalize import normalize
from vincheck.core.validator import assert_valid, is_valid, validate

__all__ = [
    "assert_valid",
    "compute_check_digit",
    "is_valid",
    "normalize",
    "validate",
]
