"""Binary data diff engine."""

import bsdiff4

from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .DiffEngine import DiffEngine
from .DiffResult import DiffResult


class DataDiffEngine(DiffEngine):
    """Exact byte comparison, summarised with a bsdiff4 patch size."""

    kind = FormatKind.BINARY

    def _compare_different(self, reference: Format, candidate: Format) -> DiffResult:
        old_data = reference.to_bytes()
        new_data = candidate.to_bytes()

        patch_size = len(bsdiff4.diff(old_data, new_data))
        offset = _first_difference(old_data, new_data)

        message = (
            "Binary snapshots differ:\n"
            f"  reference: {len(old_data)} bytes\n"
            f"  candidate: {len(new_data)} bytes\n"
            f"  first difference at byte {offset}\n"
            f"  patch size: {patch_size} bytes"
        )
        return DiffResult.mismatch(message, self.expected_actual(reference, candidate))


def _first_difference(a: bytes, b: bytes) -> int:
    for index, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return index
    return min(len(a), len(b))
