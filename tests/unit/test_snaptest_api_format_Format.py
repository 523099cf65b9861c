"""Unit tests for snaptest.api.format."""

import dataclasses

import pytest

from snaptest.api.format import Attachment, Format, FormatKind

pytestmark = pytest.mark.unit


class TestFormat:
    def test_text_helper(self):
        fmt = Format.text("hello")
        assert fmt.kind is FormatKind.TEXT
        assert fmt.payload == "hello"
        assert fmt.file_extension == "txt"

    def test_binary_helper(self):
        fmt = Format.binary(b"\x00\x01", "png")
        assert fmt.kind is FormatKind.BINARY
        assert fmt.file_extension == "png"

    def test_text_requires_str(self):
        with pytest.raises(TypeError, match="str payload"):
            Format(kind=FormatKind.TEXT, payload=b"bytes", file_extension="txt")

    def test_binary_requires_bytes(self):
        with pytest.raises(TypeError, match="bytes payload"):
            Format(kind=FormatKind.BINARY, payload="text", file_extension="bin")

    @pytest.mark.parametrize("extension", ["", ".txt"])
    def test_rejects_bad_extension(self, extension):
        with pytest.raises(ValueError, match="file_extension"):
            Format.text("x", extension)

    def test_is_immutable(self):
        fmt = Format.text("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            fmt.payload = "y"  # type: ignore[misc]

    def test_to_bytes_encodes_text_as_utf8(self):
        assert Format.text("café").to_bytes() == "café".encode()
        assert Format.text("café").size == 5

    def test_from_bytes_decodes_text(self):
        fmt = Format.from_bytes(FormatKind.TEXT, "ünïcode\n".encode(), "txt")
        assert fmt == Format.text("ünïcode\n")

    def test_from_bytes_rejects_invalid_utf8(self):
        with pytest.raises(UnicodeDecodeError):
            Format.from_bytes(FormatKind.TEXT, b"\xff\xfe\xfa", "txt")

    def test_from_bytes_keeps_binary(self):
        assert Format.from_bytes(FormatKind.BINARY, b"\xff", "bin").payload == b"\xff"

    def test_equality_is_by_value(self):
        assert Format.text("a") == Format.text("a")
        assert Format.text("a") != Format.text("a", "json")


class TestAttachment:
    def test_requires_name(self):
        with pytest.raises(ValueError, match="non-empty"):
            Attachment("", Format.text("x"))

    def test_holds_format(self):
        attachment = Attachment("expected", Format.text("x"))
        assert attachment.format.payload == "x"
