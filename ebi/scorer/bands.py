#!/usr/bin/env python3
"""
Score Bands - named ranges of the 5-50 total score used for display.
"""

from typing import Tuple

# (minimum total, label), highest first
SCORE_BANDS: Tuple[Tuple[int, str], ...] = (
    (45, "Foundational / Exemplary (45–50)"),
    (40, "High-impact, integrative (40–44)"),
    (35, "Significant but incomplete (35–39)"),
    (25, "Disruptive / cautionary (25–34)"),
)
LOWEST_BAND = "Destructive or misaligned (<25)"


def score_band(total: int) -> str:
    for floor, label in SCORE_BANDS:
        if total >= floor:
            return label
    return LOWEST_BAND
