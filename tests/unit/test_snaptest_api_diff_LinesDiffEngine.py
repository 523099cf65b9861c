"""Unit tests for snaptest.api.diff.LinesDiffEngine."""

import pytest

from snaptest.api.diff.LinesDiffEngine import LinesDiffEngine
from snaptest.api.format import Format

pytestmark = pytest.mark.unit


class TestLinesDiffEngine:
    def test_identical_text_matches(self):
        engine = LinesDiffEngine()
        assert engine.compare(Format.text("a\nb\n"), Format.text("a\nb\n")).is_match

    def test_changed_line_produces_unified_diff(self):
        engine = LinesDiffEngine()
        result = engine.compare(Format.text("Hello."), Format.text("Hello"))

        assert not result.is_match
        assert "--- reference" in result.message
        assert "+++ candidate" in result.message
        assert "-Hello." in result.message
        assert "+Hello" in result.message

    def test_attaches_expected_and_actual(self):
        engine = LinesDiffEngine()
        result = engine.compare(Format.text("x"), Format.text("y"))
        assert [a.name for a in result.attachments] == ["expected", "actual"]
        assert result.attachment("expected") == Format.text("x")
        assert result.attachment("actual") == Format.text("y")

    def test_context_lines(self):
        reference = "\n".join(f"line {i}" for i in range(10))
        candidate = reference.replace("line 5", "line five")

        narrow = LinesDiffEngine(context_lines=0).compare(Format.text(reference), Format.text(candidate))
        wide = LinesDiffEngine(context_lines=3).compare(Format.text(reference), Format.text(candidate))

        assert " line 4" not in narrow.message
        assert " line 4" in wide.message

    def test_trailing_newline_only(self):
        result = LinesDiffEngine().compare(Format.text("same\n"), Format.text("same"))
        assert not result.is_match
        assert "trailing newline" in result.message

    def test_kind_mismatch_never_matches(self):
        result = LinesDiffEngine().compare(Format.text("x"), Format.binary(b"x"))
        assert not result.is_match
        assert "kinds differ" in result.message

    def test_rejects_negative_context(self):
        with pytest.raises(ValueError, match="context_lines"):
            LinesDiffEngine(context_lines=-1)
