#!/usr/bin/env python3
"""
Scoring Modes - anchored vs explorer interpretive frame.

Anchored is the default stance: subjects are discussed relative to the
permanent anchor. Explorer mode is opt-in through a marker in the notes and
disables every anchor.
"""

from typing import Optional

from ebi.scorer.models import MODE_ANCHORED, MODE_EXPLORER

DEFAULT_EXPLORER_TOKEN = "#explorer"


def select_mode(notes: Optional[str], explorer_token: str = DEFAULT_EXPLORER_TOKEN) -> str:
    """
    Return "explorer" if the notes carry the override token, else "anchored".

    The token is looked up in the lowercased raw notes rather than the
    normalized ones, since normalization strips the "#" marker.
    """
    token = (explorer_token or "").strip().lower()
    if token and token in (notes or "").lower():
        return MODE_EXPLORER
    return MODE_ANCHORED
