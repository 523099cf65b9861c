"""Image diff engine with a tunable precision threshold."""

from __future__ import annotations

import io

import numpy as np
from PIL import Image, ImageChops, UnidentifiedImageError

from ..format.Attachment import Attachment
from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .DiffEngine import DiffEngine
from .DiffResult import DiffResult

# Maximum number of sample points per axis.
SAMPLE_GRID = 128


class ImageDiffEngine(DiffEngine):
    """Compare PNG snapshots pixel by pixel.

    With ``precision`` 1.0 every pixel must agree. Below 1.0 the agreement score
    is the fraction of identical pixels over an evenly spaced sampling grid of
    at most ``SAMPLE_GRID`` x ``SAMPLE_GRID`` points, and the snapshots match
    when that score reaches the precision. Different dimensions never match.
    """

    kind = FormatKind.BINARY

    def __init__(self, precision: float = 1.0):
        if not 0.0 <= precision <= 1.0:
            raise ValueError(f"precision must be between 0 and 1 (found: {precision!r})")
        self.precision = float(precision)

    def _compare_different(self, reference: Format, candidate: Format) -> DiffResult:
        attachments = self.expected_actual(reference, candidate)
        try:
            img_a = _decode(reference)
            img_b = _decode(candidate)
        except (UnidentifiedImageError, OSError) as exc:
            return DiffResult.mismatch(f"Image snapshot could not be decoded: {exc}", attachments)

        if img_a.size != img_b.size:
            return DiffResult.mismatch(
                "Image sizes differ: "
                f"reference is {img_a.width}x{img_a.height}, candidate is {img_b.width}x{img_b.height}",
                attachments,
            )

        arr_a = np.asarray(img_a, dtype=np.uint8)
        arr_b = np.asarray(img_b, dtype=np.uint8)

        if self.precision >= 1.0:
            if np.array_equal(arr_a, arr_b):
                return DiffResult.match()
            score = agreement(arr_a, arr_b, grid=None)
        else:
            score = agreement(arr_a, arr_b, grid=SAMPLE_GRID)
            if score >= self.precision:
                return DiffResult.match()

        message = (
            f"Image agreement {score:.4f} is below precision {self.precision:.4f} "
            f"({img_a.width}x{img_a.height} pixels)"
        )
        return DiffResult.mismatch(message, attachments + (Attachment("difference", _difference(img_a, img_b)),))


def agreement(arr_a: np.ndarray, arr_b: np.ndarray, grid: int | None = SAMPLE_GRID) -> float:
    """Fraction of identical pixels between two equally shaped RGBA arrays.

    Args:
        arr_a: First image as (height, width, channels)
        arr_b: Second image as (height, width, channels)
        grid: Sample points per axis, or None to use every pixel

    Returns:
        Agreement score in [0, 1]
    """
    if arr_a.shape != arr_b.shape:
        raise ValueError(f"arrays must share a shape (found: {arr_a.shape} and {arr_b.shape})")
    height, width = arr_a.shape[:2]
    if height == 0 or width == 0:
        return 1.0

    if grid is not None:
        rows = _sample_axis(height, grid)
        cols = _sample_axis(width, grid)
        arr_a = arr_a[np.ix_(rows, cols)]
        arr_b = arr_b[np.ix_(rows, cols)]

    equal = np.all(arr_a == arr_b, axis=-1)
    return float(equal.mean())


def _sample_axis(length: int, grid: int) -> np.ndarray:
    if length <= grid:
        return np.arange(length)
    return np.unique(np.linspace(0, length - 1, grid).round().astype(np.intp))


def _decode(snapshot: Format) -> Image.Image:
    with Image.open(io.BytesIO(snapshot.to_bytes())) as img:
        return img.convert("RGBA")


def _difference(img_a: Image.Image, img_b: Image.Image) -> Format:
    delta = ImageChops.difference(img_a.convert("RGB"), img_b.convert("RGB"))
    buffer = io.BytesIO()
    delta.save(buffer, format="PNG")
    return Format.binary(buffer.getvalue(), "png")
