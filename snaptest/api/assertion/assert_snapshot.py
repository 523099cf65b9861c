"""Assert that a subject matches its reference snapshot."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config.SnapshotConfig import SnapshotConfig
from ..report.SnapshotAssertionError import SnapshotAssertionError
from ..strategy.Strategy import Strategy
from .RunState import RunState
from .verify_snapshot import verify_snapshot


def assert_snapshot(
    subject: Any,
    strategy: str | Strategy = "dump",
    *,
    name: str | None = None,
    record: bool | None = None,
    snapshot_directory: Path | str | None = None,
    test_scope: str | None = None,
    timeout: float | None = None,
    config: SnapshotConfig | None = None,
    run_state: RunState | None = None,
) -> None:
    """Fail the calling test unless the subject matches its reference.

    Takes the same arguments as ``verify_snapshot``.

    Raises:
        SnapshotAssertionError: If the snapshot was recorded, mismatched or could
            not be produced, stored or compared
    """
    __tracebackhide__ = True
    failure = verify_snapshot(
        subject,
        strategy,
        name=name,
        record=record,
        snapshot_directory=snapshot_directory,
        test_scope=test_scope,
        timeout=timeout,
        config=config,
        run_state=run_state,
    )
    if failure is not None:
        raise SnapshotAssertionError(failure)
