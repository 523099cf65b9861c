"""Unit tests for snaptest.api.diff.DataDiffEngine."""

import pytest

from snaptest.api.diff.DataDiffEngine import DataDiffEngine
from snaptest.api.format import Format

pytestmark = pytest.mark.unit


class TestDataDiffEngine:
    def test_identical_bytes_match(self):
        assert DataDiffEngine().compare(Format.binary(b"\x00\x01"), Format.binary(b"\x00\x01")).is_match

    def test_different_bytes_report_sizes_and_offset(self):
        result = DataDiffEngine().compare(Format.binary(b"abcdef"), Format.binary(b"abXdefgh"))

        assert not result.is_match
        assert "reference: 6 bytes" in result.message
        assert "candidate: 8 bytes" in result.message
        assert "first difference at byte 2" in result.message
        assert "patch size:" in result.message

    def test_prefix_difference_offset(self):
        result = DataDiffEngine().compare(Format.binary(b"abc"), Format.binary(b"abcd"))
        assert "first difference at byte 3" in result.message

    def test_attachments(self):
        result = DataDiffEngine().compare(Format.binary(b"a"), Format.binary(b"b"))
        assert result.attachment("expected") == Format.binary(b"a")
        assert result.attachment("actual") == Format.binary(b"b")
