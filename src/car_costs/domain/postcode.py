from __future__ import annotations

import re

# Outward code (one or two letters, a digit, optional letter or digit),
# optional space, inward code (a digit and two letters).
UK_POSTCODE_PATTERN = re.compile(r"^[A-Z]{1,2}\d[A-Z\d]? ?\d[A-Z]{2}$", re.IGNORECASE)

INWARD_CODE_LENGTH = 3


def validate_postcode(postcode: str) -> bool:
    """Check that a string has the shape of a UK postcode. Does not check it exists."""
    return UK_POSTCODE_PATTERN.match(postcode.strip()) is not None


def format_postcode(postcode: str) -> str:
    """
    Normalise a postcode for display: no inner whitespace, upper case, and a
    single space before the three-character inward code.

    >>> format_postcode("sw1a1aa")
    'SW1A 1AA'
    """
    cleaned = re.sub(r"\s", "", postcode).upper()
    if len(cleaned) > INWARD_CODE_LENGTH:
        return f"{cleaned[:-INWARD_CODE_LENGTH]} {cleaned[-INWARD_CODE_LENGTH:]}"
    return cleaned
