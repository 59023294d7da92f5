"""VIN validation pipeline."""

import logging

from vincheck.core.checkdigit import compute_check_digit
from vincheck.core.normalize import normalize
from vincheck.core.transliteration import CHECK_DIGIT_POSITION, VIN_LENGTH, VIN_PATTERN
from vincheck.exceptions import CheckDigitError, InvalidVINError
from vincheck.models.results import NOT_APPLICABLE, ValidationResult, VinErrorCode
from vincheck.models.vin import VIN

logger = logging.getLogger(__name__)


def validate(text: str) -> ValidationResult:
    """Validate a VIN end-to-end.

    Never raises for string input. Every problem found is reported in
    ``errors``, in the order length, characters, check digit.

    Args:
        text: Raw user input, may contain spaces, hyphens and lowercase

    Returns:
        ValidationResult with the normalized VIN and the expected check digit
    """
    vin = normalize(text)
    errors: list[VinErrorCode] = []

    if len(vin) != VIN_LENGTH:
        errors.append(VinErrorCode.INVALID_LENGTH)

    charset_ok = VIN_PATTERN.fullmatch(vin) is not None
    if not charset_ok:
        errors.append(VinErrorCode.INVALID_CHARACTERS)

    actual = vin[CHECK_DIGIT_POSITION - 1] if len(vin) >= CHECK_DIGIT_POSITION else ""
    expected = NOT_APPLICABLE

    # A check digit over the wrong number of characters is meaningless
    if len(vin) == VIN_LENGTH:
        try:
            expected = compute_check_digit(vin)
        except CheckDigitError as e:
            logger.debug("Check digit not computed: %s", e.message)
        else:
            if charset_ok and actual != expected:
                errors.append(VinErrorCode.INVALID_CHECK_DIGIT)

    result = ValidationResult(
        vin=vin,
        is_valid=not errors,
        errors=tuple(errors),
        check_digit=actual,
        expected_check_digit=expected,
    )
    logger.debug(
        "Validated %r: valid=%s errors=[%s]", vin, result.is_valid, result.error_summary
    )
    return result


def is_valid(text: str) -> bool:
    """Check whether text is a valid VIN after normalization."""
    return validate(text).is_valid


def assert_valid(text: str) -> VIN:
    """Validate text and return it as a VIN.

    Raises:
        InvalidVINError: If validation recorded any error
    """
    result = validate(text)
    if not result.is_valid:
        raise InvalidVINError(result)
    return VIN(result.vin)
