"""Unit tests for snaptest.api.diff.ImageDiffEngine."""

import io

import numpy as np
import pytest
from PIL import Image

from snaptest.api.diff.ImageDiffEngine import ImageDiffEngine, agreement
from snaptest.api.format import Format

pytestmark = pytest.mark.unit


def png(img: Image.Image) -> Format:
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return Format.binary(buffer.getvalue(), "png")


def white(width: int = 10, height: int = 10) -> Image.Image:
    return Image.new("RGB", (width, height), "white")


def with_black_pixels(count: int) -> Image.Image:
    img = white()
    for i in range(count):
        img.putpixel((i, 0), (0, 0, 0))
    return img


class TestImageDiffEngine:
    def test_identical_images_match(self):
        assert ImageDiffEngine().compare(png(white()), png(white())).is_match

    def test_five_percent_difference_within_precision(self):
        engine = ImageDiffEngine(precision=0.9)
        assert engine.compare(png(white()), png(with_black_pixels(5))).is_match

    def test_five_percent_difference_fails_exact(self):
        result = ImageDiffEngine(precision=1.0).compare(png(white()), png(with_black_pixels(5)))

        assert not result.is_match
        assert "0.9500" in result.message
        assert [a.name for a in result.attachments] == ["expected", "actual", "difference"]

    def test_difference_attachment_is_png(self):
        result = ImageDiffEngine().compare(png(white()), png(with_black_pixels(1)))
        difference = result.attachment("difference")
        assert difference is not None
        with Image.open(io.BytesIO(difference.to_bytes())) as img:
            assert img.size == (10, 10)

    def test_below_precision_fails(self):
        result = ImageDiffEngine(precision=0.9).compare(png(white()), png(_half_black()))
        assert not result.is_match
        assert "0.5000" in result.message
        assert "below precision 0.9000" in result.message

    def test_size_mismatch(self):
        result = ImageDiffEngine(precision=0.5).compare(png(white(10, 10)), png(white(10, 12)))
        assert not result.is_match
        assert result.message == "Image sizes differ: reference is 10x10, candidate is 10x12"

    def test_undecodable_snapshot(self):
        result = ImageDiffEngine().compare(png(white()), Format.binary(b"not a png", "png"))
        assert not result.is_match
        assert "could not be decoded" in result.message

    def test_same_pixels_different_encoding_match(self):
        rgba = white().convert("RGBA")
        assert ImageDiffEngine().compare(png(white()), png(rgba)).is_match

    @pytest.mark.parametrize("precision", [-0.1, 1.5])
    def test_rejects_precision_out_of_range(self, precision):
        with pytest.raises(ValueError, match="precision"):
            ImageDiffEngine(precision=precision)


class TestAgreement:
    def test_full_agreement(self):
        arr = np.zeros((4, 4, 4), dtype=np.uint8)
        assert agreement(arr, arr.copy()) == 1.0

    def test_partial_agreement(self):
        arr_a = np.zeros((2, 2, 4), dtype=np.uint8)
        arr_b = arr_a.copy()
        arr_b[0, 0, 0] = 255
        assert agreement(arr_a, arr_b, grid=None) == 0.75

    def test_sampling_grid_limits_points(self):
        arr_a = np.zeros((300, 300, 4), dtype=np.uint8)
        arr_b = arr_a.copy()
        arr_b[:, :150] = 255
        score = agreement(arr_a, arr_b, grid=16)
        assert 0.4 <= score <= 0.6

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="shape"):
            agreement(np.zeros((2, 2, 4)), np.zeros((2, 3, 4)))


def _half_black() -> Image.Image:
    img = white()
    for x in range(10):
        for y in range(5):
            img.putpixel((x, y), (0, 0, 0))
    return img
