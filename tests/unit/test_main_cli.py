"""
Unit tests for the command line entry point.
"""
import json

import pytest

from main import build_parser, main


@pytest.fixture(autouse=True)
def offline(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


class TestScoreCommand:

    def test_anchor_subject_prints_report(self, capsys):
        assert main(["score", "Jesus"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total_score"] == 50
        assert data["engine"] == "anchor"
        assert data["subject_type"] == "person"

    def test_event_with_notes(self, capsys):
        assert main(["score", "Fall of Rome", "--type", "event", "--notes", "collapse"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["subject_type"] == "event"
        assert data["engine"] == "deterministic_fallback"
        assert 5 <= data["total_score"] <= 50

    def test_explorer_notes(self, capsys):
        assert main(["score", "Jesus", "--notes", "#explorer"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["mode"] == "explorer"
        assert data["anchor"] is None

    def test_blank_subject_exit_code(self, capsys):
        assert main(["score", "   "]) == 2
        assert capsys.readouterr().out == ""

    def test_unknown_type_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["score", "X", "--type", "planet"])


class TestParser:

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_serve_command(self):
        args = build_parser().parse_args(["serve"])
        assert args.command == "serve"
