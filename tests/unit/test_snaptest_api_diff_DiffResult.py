"""Unit tests for snaptest.api.diff.DiffResult."""

import pytest

from snaptest.api.diff.DiffResult import DiffResult
from snaptest.api.format import Attachment, Format

pytestmark = pytest.mark.unit


class TestDiffResult:
    def test_match(self):
        result = DiffResult.match()
        assert result.is_match
        assert result.message == ""
        assert result.attachments == ()

    def test_mismatch_requires_message(self):
        with pytest.raises(ValueError, match="non-empty message"):
            DiffResult.mismatch("")

    def test_rejects_unknown_status(self):
        with pytest.raises(ValueError, match="status"):
            DiffResult(status="maybe")  # type: ignore[arg-type]

    def test_mismatch_converts_attachments_to_tuple(self):
        expected = Attachment("expected", Format.text("a"))
        result = DiffResult.mismatch("differs", [expected])
        assert not result.is_match
        assert result.attachments == (expected,)
        assert result.attachment("expected") == Format.text("a")
        assert result.attachment("missing") is None

    def test_to_dict(self):
        result = DiffResult.mismatch("differs", [Attachment("actual", Format.binary(b"abc", "png"))])
        assert result.to_dict() == {
            "status": "mismatch",
            "message": "differs",
            "attachments": [{"name": "actual", "kind": "binary", "file_extension": "png", "size": 3}],
        }
