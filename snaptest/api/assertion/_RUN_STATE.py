"""Default run state for the process."""

from .RunState import RunState

RUN_STATE = RunState()
