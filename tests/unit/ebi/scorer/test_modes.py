#!/usr/bin/env python3
"""
Unit tests for anchored/explorer mode selection.
"""

from ebi.scorer.modes import select_mode
from ebi.scorer.models import MODE_ANCHORED, MODE_EXPLORER


class TestSelectMode:

    def test_default_is_anchored(self):
        assert select_mode("") == MODE_ANCHORED
        assert select_mode(None) == MODE_ANCHORED

    def test_token_switches_to_explorer(self):
        assert select_mode("please use #explorer mode") == MODE_EXPLORER

    def test_token_is_case_insensitive(self):
        assert select_mode("#EXPLORER") == MODE_EXPLORER

    def test_word_without_marker_stays_anchored(self):
        """The bare word is not the token; only the marked form switches mode."""
        assert select_mode("an explorer of ideas") == MODE_ANCHORED

    def test_custom_token(self):
        assert select_mode("go !open", explorer_token="!open") == MODE_EXPLORER
        assert select_mode("go #explorer", explorer_token="!open") == MODE_ANCHORED

    def test_blank_token_never_matches(self):
        assert select_mode("#explorer", explorer_token="  ") == MODE_ANCHORED
