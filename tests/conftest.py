"""Shared pytest configuration and fixtures for all tests."""

import logging

import pytest

from snaptest.api.assertion import RUN_STATE, SequenceCounters
from snaptest.api.config.SnapshotConfig import CONFIG_ENV, DIFF_TOOL_ENV, RECORD_ENV


def pytest_configure(config):
    for marker in ("unit", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests (applied by directory)")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def isolated_run(monkeypatch, tmp_path):
    """Keep every test away from real configuration and shared run state.

    Runs each test from an empty working directory with the snaptest
    environment variables cleared, recording off and fresh counters.
    """
    for name in (CONFIG_ENV, RECORD_ENV, DIFF_TOOL_ENV):
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    RUN_STATE.recording = False
    RUN_STATE.counters = SequenceCounters()
    yield
    RUN_STATE.recording = False
    RUN_STATE.counters = SequenceCounters()


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow configure_logging to run again and drop the handlers it adds."""
    from snaptest.utils import logger as logger_module

    root = logging.getLogger("snaptest")
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
