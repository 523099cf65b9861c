"""Snapshot identity dataclass."""

from dataclasses import dataclass

from .validate_assertion_name import validate_assertion_name


@dataclass(frozen=True)
class SnapshotIdentity:
    """Address of one reference artifact within one test run."""

    test_scope: str
    assertion_name: str | None
    sequence_index: int
    strategy_name: str

    def __post_init__(self):
        if not self.test_scope:
            raise ValueError("test_scope must be non-empty")
        if self.assertion_name is not None:
            validate_assertion_name(self.assertion_name)
        if self.sequence_index < 0:
            raise ValueError(f"sequence_index must be >= 0 (found: {self.sequence_index})")

    @property
    def identifier(self) -> str:
        """Name, index, or ``name-index`` when a name repeats within a test."""
        if self.assertion_name is None:
            return str(self.sequence_index)
        if self.sequence_index == 0:
            return self.assertion_name
        return f"{self.assertion_name}-{self.sequence_index}"
