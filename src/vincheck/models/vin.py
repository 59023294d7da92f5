"""Branded VIN type."""

from typing import Annotated, NewType

from pydantic import AfterValidator

from vincheck.core.transliteration import VIN_LENGTH

# A string that has passed full validation. Only assert_valid() and the
# VINStr field type produce one; do not construct it directly.
VIN = NewType("VIN", str)


def _validate_field(value: str) -> VIN:
    from vincheck.core.validator import assert_valid

    return assert_valid(value)


# Pydantic field type: normalizes and validates, storing the VIN.
VINStr = Annotated[str, AfterValidator(_validate_field)]

__all__ = ["VIN", "VINStr", "VIN_LENGTH"]
