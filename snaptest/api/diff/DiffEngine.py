"""Base class for diff engines."""

from abc import ABC, abstractmethod
from typing import ClassVar

from ..format.Attachment import Attachment
from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .DiffResult import DiffResult


class DiffEngine(ABC):
    """Base class for diff engines.

    Subclasses only describe snapshots that are known to differ; identical
    payloads always match and a kind mismatch never does.
    """

    kind: ClassVar[FormatKind]

    def compare(self, reference: Format, candidate: Format) -> DiffResult:
        """Compare a reference snapshot with a candidate.

        Args:
            reference: Previously recorded snapshot
            candidate: Newly produced snapshot

        Returns:
            DiffResult with status "match" or "mismatch"
        """
        if reference.kind is not candidate.kind:
            return DiffResult.mismatch(
                f"Snapshot kinds differ: reference is {reference.kind.value}, candidate is {candidate.kind.value}",
                self.expected_actual(reference, candidate),
            )
        if reference.payload == candidate.payload:
            return DiffResult.match()
        return self._compare_different(reference, candidate)

    @abstractmethod
    def _compare_different(self, reference: Format, candidate: Format) -> DiffResult:
        """Compare two same-kind snapshots whose payloads are not byte-identical."""
        pass

    @staticmethod
    def expected_actual(reference: Format, candidate: Format) -> tuple[Attachment, ...]:
        return (Attachment("expected", reference), Attachment("actual", candidate))
