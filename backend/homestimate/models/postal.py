"""Canadian postal code helpers.

Postal codes are six characters in the form ``A1A 1A1``. The first letter
never uses D, F, I, O, Q, U, W or Z; the other letters never use D, F, I, O,
Q or U.
"""

from __future__ import annotations

import re

POSTAL_CODE_RE = re.compile(
    r"^[ABCEGHJ-NPRSTVXY]\d[ABCEGHJ-NPRSTV-Z]\d[ABCEGHJ-NPRSTV-Z]\d$"
)

# Loose shape check used on raw search text before geocoding.
_POSTAL_CODE_SHAPE_RE = re.compile(r"^[A-Za-z]\d[A-Za-z]\s?\d[A-Za-z]\d$")


def normalize_postal_code(value: str) -> str:
    """Uppercase *value* and strip all whitespace from it."""
    return re.sub(r"\s", "", value).upper()


def is_postal_code(value: str) -> bool:
    """Return True if *value* is a valid postal code once normalized."""
    return POSTAL_CODE_RE.match(normalize_postal_code(value)) is not None


def looks_like_postal_code(value: str) -> bool:
    """Return True if *value* has the letter-digit shape of a postal code.

    Unlike :func:`is_postal_code` this does not check the letter sets and
    allows a single space between the two halves.
    """
    return _POSTAL_CODE_SHAPE_RE.match(value.strip()) is not None


def format_postal_code(value: str) -> str:
    """Format a postal code for display as ``A1A 1A1``."""
    code = normalize_postal_code(value)
    if len(code) != 6:
        return code
    return f"{code[:3]} {code[3:]}"
