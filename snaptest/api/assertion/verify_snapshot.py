"""Record-or-compare workflow for one snapshot assertion."""

from __future__ import annotations

import tempfile
import warnings
from pathlib import Path
from typing import Any

from ...utils.logger import get_logger
from ..config.SnapshotConfig import SnapshotConfig
from ..config.SnapshotConfigError import SnapshotConfigError
from ..format.Attachment import Attachment
from ..format.Format import Format
from ..report.SnapshotFailure import SnapshotFailure
from ..report.SnapshotRecordedWarning import SnapshotRecordedWarning
from ..snapshot.produce import produce
from ..snapshot.ProductionTimeoutError import ProductionTimeoutError
from ..store.ArtifactIOError import ArtifactIOError
from ..store.ArtifactStore import ArtifactStore
from ..store.default_snapshot_directory import default_snapshot_directory
from ..store.SnapshotIdentity import SnapshotIdentity
from ..store.validate_assertion_name import validate_assertion_name
from ..strategy.resolve_strategy import resolve_strategy
from ..strategy.Strategy import Strategy
from ..strategy.UnsupportedCapabilityError import UnsupportedCapabilityError
from ._RUN_STATE import RUN_STATE
from .launch_diff_tool import diff_command, launch_diff_tool
from .resolve_caller import resolve_caller, warning_stacklevel
from .resolve_test_scope import resolve_test_scope
from .RunState import RunState

logger = get_logger("assertion")


def verify_snapshot(
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
) -> SnapshotFailure | None:
    """Check a subject against its reference snapshot, recording it when needed.

    Nothing raised while resolving, producing, storing or diffing escapes;
    every problem becomes the returned SnapshotFailure.

    Args:
        subject: Value to snapshot
        strategy: Capability name (e.g. "dump", "image") or a Strategy
        name: Optional assertion name used instead of the sequence index
        record: Per-call recording override; None defers to run state and config
        snapshot_directory: Directory of reference artifacts; defaults to
            ``__snapshots__/<test file stem>`` next to the calling test file
        test_scope: Test identity; defaults to the running pytest item or the
            calling function name
        timeout: Seconds to wait for deferred snapshots (default from config)
        config: Configuration; loaded from file and environment when omitted
        run_state: Run state holding the recording flag and counters

    Returns:
        None when the snapshot matches (or was recorded with severity "warn"),
        otherwise the failure to report
    """
    state = run_state or RUN_STATE
    caller_file, caller_function = resolve_caller()
    scope = resolve_test_scope(test_scope, caller_function)

    if config is None:
        try:
            config = SnapshotConfig.load()
        except SnapshotConfigError as exc:
            return SnapshotFailure(kind="error", message=str(exc), test_scope=scope)

    try:
        resolved = resolve_strategy(strategy)
    except UnsupportedCapabilityError as exc:
        return SnapshotFailure(kind="unsupported", message=str(exc), test_scope=scope)

    if name is not None:
        try:
            validate_assertion_name(name)
        except ValueError as exc:
            return SnapshotFailure(kind="error", message=str(exc), test_scope=scope)

    directory = (
        Path(snapshot_directory)
        if snapshot_directory is not None
        else default_snapshot_directory(caller_file, config.snapshot_dirname)
    )
    store = ArtifactStore(directory)

    # Start
    identity = SnapshotIdentity(
        test_scope=scope,
        assertion_name=name,
        sequence_index=state.counters.next(scope, name),
        strategy_name=resolved.name,
    )
    reference_path = store.path(identity, resolved.path_extension)

    # Produced
    wait = timeout if timeout is not None else config.timeout_seconds
    try:
        candidate = produce(subject, resolved, wait)
    except ProductionTimeoutError as exc:
        logger.warning("Snapshot production timed out for %s", reference_path.name)
        return SnapshotFailure(
            kind="timeout", message=str(exc), test_scope=scope, identity=identity, reference_path=reference_path
        )
    except Exception as exc:
        logger.exception("Snapshot production failed for %s", reference_path.name)
        return SnapshotFailure(
            kind="error",
            message=f"Snapshot production failed: {type(exc).__name__}: {exc}",
            test_scope=scope,
            identity=identity,
            reference_path=reference_path,
        )

    recording = record if record is not None else (state.recording or config.record)

    try:
        reference = None if recording else store.read(reference_path, resolved.kind)

        if reference is None:
            store.write(reference_path, candidate)
            return _recorded(identity, reference_path, candidate, recording, config)

        # Compared
        try:
            result = resolved.diff(reference, candidate)
        except Exception as exc:
            logger.exception("Snapshot diff failed for %s", reference_path.name)
            return SnapshotFailure(
                kind="error",
                message=f"Snapshot diff failed: {type(exc).__name__}: {exc}",
                test_scope=scope,
                identity=identity,
                reference_path=reference_path,
            )
        if result.is_match:
            return None
    except ArtifactIOError as exc:
        logger.error("%s", exc)
        return SnapshotFailure(
            kind="io_error", message=str(exc), test_scope=scope, identity=identity, reference_path=reference_path
        )

    message = result.message
    failure_path = None
    command = None
    if config.persist_failures or config.diff_tool:
        try:
            # Without persistence the diff tool still gets a candidate file, in a temp directory.
            failure_store = store if config.persist_failures else ArtifactStore(tempfile.mkdtemp(prefix="snaptest-"))
            location = failure_store.failure_path(identity, resolved.path_extension)
            failure_store.write(location, candidate)
        except (ArtifactIOError, OSError) as exc:
            logger.error("Could not keep mismatching snapshot: %s", exc)
            message = f"{message}\n\nCould not keep mismatching snapshot: {exc}"
        else:
            if config.persist_failures:
                failure_path = location
            if config.diff_tool:
                command = diff_command(config.diff_tool, reference_path, location)
                launch_diff_tool(config.diff_tool, reference_path, location)

    logger.info("Snapshot mismatch for %s", reference_path.name)
    return SnapshotFailure(
        kind="mismatch",
        message=message,
        test_scope=scope,
        identity=identity,
        reference_path=reference_path,
        candidate_path=failure_path,
        attachments=result.attachments,
        diff_command=command,
    )


def _recorded(
    identity: SnapshotIdentity,
    reference_path: Path,
    candidate: Format,
    recording: bool,
    config: SnapshotConfig,
) -> SnapshotFailure | None:
    if recording:
        message = (
            "Record mode is on. Turn record mode off and re-run "
            f'"{identity.test_scope}" to test against the newly-recorded snapshot.'
        )
    else:
        message = (
            "No reference was found on disk. Automatically recorded snapshot.\n\n"
            f'Re-run "{identity.test_scope}" to test against the newly-recorded snapshot.'
        )
    logger.info("Recorded snapshot %s", reference_path)

    if config.record_severity == "warn":
        warnings.warn(SnapshotRecordedWarning(f"{message} ({reference_path})"), stacklevel=warning_stacklevel())
        return None

    return SnapshotFailure(
        kind="recorded",
        message=message,
        test_scope=identity.test_scope,
        identity=identity,
        reference_path=reference_path,
        attachments=(Attachment("recorded", candidate),),
    )
