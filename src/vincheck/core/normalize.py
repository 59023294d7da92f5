"""Input normalization."""

import re

_SEPARATORS = re.compile(r"[\s-]+")


def normalize(text: str) -> str:
    """Uppercase and strip all whitespace and hyphens.

    Does not check length or characters; "1hg-cm8 2633" becomes "1HGCM82633".
    """
    return _SEPARATORS.sub("", text.upper())
