"""Loose product code extraction kept for compatibility with older exports.

Accepts any 8-15 character alphanumeric token with a letter/digit mix found
near a ``・`` separator or at the end of the name. Less precise than the
canonical rules in extraction.rules; only used when the loose policy is asked
for explicitly.
"""

import re
from typing import Optional

from extraction.models import NOT_FOUND, CodeSource, ExtractionResult, Found, PatternId

_LOOSE_PATTERNS: list[re.Pattern] = [
    # Token before ・ separator (most common)
    re.compile(r"\s([0-9A-Z]{8,15})・"),
    # Token at the end of the name
    re.compile(r"\s([0-9A-Z]{8,15})\s*\Z"),
    # digits-letters-digits mix
    re.compile(r"\s([0-9]+[A-Z]+[0-9]+[A-Z0-9]*)(?=・|\s|\Z)"),
    re.compile(r"\s([A-Z]*[0-9]+[A-Z]+[0-9A-Z]*)(?=・|\s|\Z)"),
]

_ALNUM_RE = re.compile(r"[0-9A-Z]{8,15}")
_LETTER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_ALL_DIGITS_RE = re.compile(r"[0-9]+")
_EU_SIZE_RE = re.compile(r"EU[0-9]+")


def is_valid_loose_code(token: Optional[str]) -> bool:
    """Heuristic check for a loose code.

    Rejects size tokens (EU12345678) and purely numeric ones such as years;
    the length gate alone already rules out short sizes (EU38) and years (2020).
    """
    if not token or not _ALNUM_RE.fullmatch(token):
        return False
    if not _LETTER_RE.search(token) or not _DIGIT_RE.search(token):
        return False
    if _ALL_DIGITS_RE.fullmatch(token):
        return False
    if _EU_SIZE_RE.fullmatch(token):
        return False
    return True


def extract_loose(original_name: Optional[str]) -> ExtractionResult:
    """Return the first candidate from the loose patterns that passes validation."""
    if not original_name:
        return NOT_FOUND

    for pattern in _LOOSE_PATTERNS:
        m = pattern.search(original_name)
        if m and is_valid_loose_code(m.group(1)):
            return Found(
                code=m.group(1),
                source=CodeSource.ORIGINAL_NAME,
                pattern=PatternId.LOOSE,
            )

    return NOT_FOUND
