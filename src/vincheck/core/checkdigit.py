"""ISO 3779 check digit calculation."""

from vincheck.core.transliteration import VIN_LENGTH, WEIGHTS, transliterate
from vincheck.exceptions import CheckDigitLengthError, TransliterationError


def compute_check_digit(vin: str) -> str:
    """Compute the ISO 3779 check digit of a 17-character VIN.

    The VIN is expected to be normalized already; only letter case is
    folded here, separators are not stripped.

    Args:
        vin: 17-character VIN candidate

    Returns:
        "0".."9", or "X" when the weighted sum leaves remainder 10

    Raises:
        CheckDigitLengthError: If vin is not 17 characters long
        TransliterationError: If a character has no transliteration value
    """
    vin = vin.upper()
    if len(vin) != VIN_LENGTH:
        raise CheckDigitLengthError(len(vin))

    total = 0
    for position, (char, weight) in enumerate(zip(vin, WEIGHTS), 1):
        value = transliterate(char)
        if value is None:
            raise TransliterationError(char, position)
        total += value * weight

    remainder = total % 11
    return "X" if remainder == 10 else str(remainder)
