import math
import re
from typing import Any, Optional

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: Optional[Any]) -> str:
    """Canonicalize free text for alias and keyword matching.

    Trims, lowercases, strips punctuation (anything that is neither a word
    character nor whitespace) and collapses whitespace runs to one space.
    None and empty input give "".
    """
    if text is None:
        return ""
    value = str(text).strip().lower()
    value = _NON_WORD.sub("", value)
    return _WHITESPACE.sub(" ", value).strip()


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    rounded = math.floor(abs(value) + 0.5)
    return int(math.copysign(rounded, value)) if rounded else 0


def clamp_score(value: float, lo: int = 1, hi: int = 10) -> int:
    """Round then clamp a dimension score into [lo, hi]."""
    return max(lo, min(hi, round_half_away(value)))
