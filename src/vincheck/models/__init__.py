"""Data models for vincheck."""

from vincheck.models.results import NOT_APPLICABLE, ValidationResult, VinErrorCode
from vincheck.models.vin import VIN, VIN_LENGTH, VINStr

__all__ = [
    # VIN
    "VIN",
    "VINStr",
    "VIN_LENGTH",
    # Results
    "NOT_APPLICABLE",
    "ValidationResult",
    "VinErrorCode",
]
