"""ISO 3779 transliteration table and position weights."""

import re
from types import MappingProxyType

VIN_LENGTH = 17

# Check digit position (1-based)
CHECK_DIGIT_POSITION = 9

# Position weights 1..17, check digit slot weighs 0
WEIGHTS: tuple[int, ...] = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)

TRANSLITERATION = MappingProxyType(
    {
        # Digits map to themselves
        "0": 0, "1": 1, "2": 2, "3": 3, "4": 4,
        "5": 5, "6": 6, "7": 7, "8": 8, "9": 9,
        # Letters (I, O, Q are never assigned)
        "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8,
        "J": 1, "K": 2, "L": 3, "M": 4, "N": 5, "P": 7, "R": 9,
        "S": 2, "T": 3, "U": 4, "V": 5, "W": 6, "X": 7, "Y": 8, "Z": 9,
    }
)

ALPHABET = frozenset(TRANSLITERATION)

VIN_PATTERN = re.compile(r"[A-HJ-NPR-Z0-9]{17}")


def transliterate(character: str) -> int | None:
    """Return the numeric value of a VIN character, or None if forbidden."""
    return TRANSLITERATION.get(character)
