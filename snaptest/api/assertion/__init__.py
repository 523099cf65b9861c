"""Assertion module - the record/compare workflow."""

from ._RUN_STATE import RUN_STATE
from .assert_snapshot import assert_snapshot
from .launch_diff_tool import diff_command, launch_diff_tool
from .record_mode import record_mode
from .resolve_test_scope import resolve_test_scope, scope_from_node_id
from .RunState import RunState
from .SequenceCounters import SequenceCounters
from .verify_snapshot import verify_snapshot

__all__ = [
    "RUN_STATE",
    "RunState",
    "SequenceCounters",
    "assert_snapshot",
    "diff_command",
    "launch_diff_tool",
    "record_mode",
    "resolve_test_scope",
    "scope_from_node_id",
    "verify_snapshot",
]
