"""Line-oriented text diff engine."""

from __future__ import annotations

import difflib

from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .DiffEngine import DiffEngine
from .DiffResult import DiffResult


class LinesDiffEngine(DiffEngine):
    """Text diff engine producing a unified diff."""

    kind = FormatKind.TEXT

    def __init__(self, context_lines: int = 3):
        if context_lines < 0:
            raise ValueError(f"context_lines must be a non-negative int (found: {context_lines!r})")
        self.context_lines = context_lines

    def _compare_different(self, reference: Format, candidate: Format) -> DiffResult:
        text_a = str(reference.payload)
        text_b = str(candidate.payload)

        diff_lines = list(
            difflib.unified_diff(
                text_a.splitlines(),
                text_b.splitlines(),
                fromfile="reference",
                tofile="candidate",
                n=self.context_lines,
                lineterm="",
            )
        )

        if not diff_lines:
            # Same lines, different terminators.
            message = (
                "Snapshots differ only in line endings or a trailing newline.\n"
                f"  reference ends with {text_a[-2:]!r}\n"
                f"  candidate ends with {text_b[-2:]!r}"
            )
        else:
            message = "\n".join(diff_lines)

        return DiffResult.mismatch(message, self.expected_actual(reference, candidate))
