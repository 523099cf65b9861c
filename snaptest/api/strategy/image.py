"""PNG image strategy."""

import io
from typing import Any

from PIL import Image

from ..diff.ImageDiffEngine import ImageDiffEngine
from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .Strategy import Strategy


def image(precision: float = 1.0) -> Strategy:
    """Snapshot a Pillow image as PNG.

    Args:
        precision: Fraction of sampled pixels that must agree (1.0 = exact)
    """
    engine = ImageDiffEngine(precision=precision)

    def snapshot(subject: Any) -> Format:
        if not isinstance(subject, Image.Image):
            raise TypeError(f"image strategy requires a PIL.Image.Image (found: {type(subject).__name__})")
        buffer = io.BytesIO()
        subject.save(buffer, format="PNG")
        return Format.binary(buffer.getvalue(), "png")

    return Strategy(
        name="image",
        path_extension="png",
        kind=FormatKind.BINARY,
        snapshot=snapshot,
        diff=engine.compare,
    )
