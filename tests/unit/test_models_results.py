"""Tests for result models and the VIN field type."""

import json

import pytest
from pydantic import BaseModel, ValidationError

from vincheck.models import NOT_APPLICABLE, VIN, ValidationResult, VinErrorCode, VINStr


class TestVinErrorCode:
    def test_members(self):
        assert [c.value for c in VinErrorCode] == [
            "INVALID_LENGTH",
            "INVALID_CHARACTERS",
            "INVALID_CHECK_DIGIT",
        ]

    def test_compares_as_string(self):
        assert VinErrorCode.INVALID_LENGTH == "INVALID_LENGTH"


class TestValidationResult:
    def test_defaults(self):
        r = ValidationResult(vin="", is_valid=False)
        assert r.errors == ()
        assert r.check_digit == ""
        assert r.expected_check_digit == NOT_APPLICABLE

    def test_frozen(self):
        r = ValidationResult(vin="X", is_valid=False)
        with pytest.raises(ValidationError):
            r.is_valid = True

    def test_has_error(self):
        r = ValidationResult(
            vin="1HGCM82603A004352",
            is_valid=False,
            errors=(VinErrorCode.INVALID_CHECK_DIGIT,),
            check_digit="0",
            expected_check_digit="3",
        )
        assert r.has_error(VinErrorCode.INVALID_CHECK_DIGIT)
        assert not r.has_error(VinErrorCode.INVALID_LENGTH)

    def test_error_summary(self):
        r = ValidationResult(
            vin="",
            is_valid=False,
            errors=(VinErrorCode.INVALID_LENGTH, VinErrorCode.INVALID_CHARACTERS),
        )
        assert r.error_summary == "INVALID_LENGTH, INVALID_CHARACTERS"

    def test_error_summary_empty_when_valid(self):
        r = ValidationResult(vin="1HGCM82633A004352", is_valid=True)
        assert r.error_summary == ""

    def test_describe_valid(self):
        r = ValidationResult(vin="1HGCM82633A004352", is_valid=True)
        assert r.describe() == "Valid VIN: 1HGCM82633A004352"

    def test_describe_invalid(self):
        r = ValidationResult(
            vin="1HGCM82603A004352",
            is_valid=False,
            errors=(VinErrorCode.INVALID_CHECK_DIGIT,),
            expected_check_digit="3",
        )
        assert r.describe() == "Invalid VIN: INVALID_CHECK_DIGIT (expected check digit: 3)"

    def test_json_dump(self):
        r = ValidationResult(
            vin="1HGCM82603A004352",
            is_valid=False,
            errors=(VinErrorCode.INVALID_CHECK_DIGIT,),
            check_digit="0",
            expected_check_digit="3",
        )
        data = json.loads(r.model_dump_json())
        assert data == {
            "vin": "1HGCM82603A004352",
            "is_valid": False,
            "errors": ["INVALID_CHECK_DIGIT"],
            "check_digit": "0",
            "expected_check_digit": "3",
        }


class Vehicle(BaseModel):
    vin: VINStr


class TestVINStr:
    def test_valid_is_normalized(self):
        v = Vehicle(vin=" 1hg-cm82633a004352 ")
        assert v.vin == "1HGCM82633A004352"

    def test_invalid_check_digit(self, wrong_check_digit_vin):
        with pytest.raises(ValidationError, match="INVALID_CHECK_DIGIT"):
            Vehicle(vin=wrong_check_digit_vin)

    def test_invalid_length(self):
        with pytest.raises(ValidationError, match="INVALID_LENGTH"):
            Vehicle(vin="1HGCM82633A00435")

    def test_not_a_string(self):
        with pytest.raises(ValidationError):
            Vehicle(vin=12345)

    def test_missing(self):
        with pytest.raises(ValidationError):
            Vehicle()

    def test_vin_brand_is_plain_str(self):
        assert VIN("1HGCM82633A004352") == "1HGCM82633A004352"
        assert type(VIN("1HGCM82633A004352")) is str
