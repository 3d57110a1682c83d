"""Rule-based product code extraction using regex patterns.

Original names look like
``BALLY・BALLY バリー パンプス 紺 EU37(23.5cm位) 4104125G0002・パンプス・紺・EU37(23.5cm位)``
where ``・`` separates brand, title, category, color and size. The code is the
12-character token right before a ``・``.
"""

import re
from typing import Optional

from extraction.models import NOT_FOUND, CodeSource, ExtractionResult, Found, PatternId

# 7 digits + 1 uppercase letter + 4 digits, e.g. 2020324D0039
_CODE = r"[0-9]{7}[A-Z][0-9]{4}"
_CODE_RE = re.compile(_CODE)

# --- original_name rules (order matters: most specific first) ---
_ORIGINAL_NAME_RULES: list[tuple[PatternId, re.Pattern]] = [
    # EU37(23.5cm位) 4104125G0002・
    (PatternId.AFTER_SIZE, re.compile(rf"EU[0-9]+[^)]*\)\s+({_CODE})・")),
    # ショルダーバッグ 黒 - 0272225S0073・
    (PatternId.AFTER_DASH, re.compile(rf"-\s+({_CODE})・")),
    # ブーツ ゴールド 2020324D0039・
    (PatternId.AFTER_COLOR, re.compile(rf"\s+({_CODE})・")),
]

# --- description rule ---
MODEL_NUMBER_LABEL = "【型番】"
# Code on the label line (after any text) or on the line right after it
_DESCRIPTION_RE = re.compile(rf"{MODEL_NUMBER_LABEL}[^\n]*?\n?([A-Z0-9]+)")


def is_canonical_code(token: Optional[str]) -> bool:
    """True for 12-character codes shaped like 2020324D0039."""
    return bool(token) and _CODE_RE.fullmatch(token) is not None


def _first_match(text: str, rules: list[tuple[PatternId, re.Pattern]]) -> Optional[tuple[PatternId, str]]:
    for pattern_id, pattern in rules:
        m = pattern.search(text)
        if m:
            return pattern_id, m.group(1)
    return None


def extract_from_original_name(original_name: Optional[str]) -> ExtractionResult:
    """Extract a canonical code from the original (Japanese) name.

    Rules run most-specific first and the first match wins, so a code after a
    size marker is reported as AFTER_SIZE even though it also has the
    AFTER_COLOR shape.
    """
    if not original_name:
        return NOT_FOUND

    hit = _first_match(original_name, _ORIGINAL_NAME_RULES)
    if hit is None:
        return NOT_FOUND

    pattern_id, code = hit
    return Found(code=code, source=CodeSource.ORIGINAL_NAME, pattern=pattern_id)


def extract_from_description(description: Optional[str]) -> ExtractionResult:
    """Extract the model number that follows the 【型番】 label."""
    if not description:
        return NOT_FOUND

    m = _DESCRIPTION_RE.search(description)
    if not m:
        return NOT_FOUND

    return Found(
        code=m.group(1),
        source=CodeSource.DESCRIPTION,
        pattern=PatternId.DESCRIPTION_LABEL,
    )
