"""pytest integration: per-test run state and a record flag."""

import pytest

from .api.assertion._RUN_STATE import RUN_STATE
from .api.assertion.resolve_test_scope import scope_from_node_id

RECORD_OPTION = "--snapshot-record"
_PRIOR_RECORDING = pytest.StashKey[bool]()


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        RECORD_OPTION,
        action="store_true",
        default=False,
        help="Record every snaptest snapshot instead of comparing",
    )


def pytest_configure(config: pytest.Config) -> None:
    if config.getoption(RECORD_OPTION):
        config.stash[_PRIOR_RECORDING] = RUN_STATE.recording
        RUN_STATE.recording = True


def pytest_unconfigure(config: pytest.Config) -> None:
    if _PRIOR_RECORDING in config.stash:
        RUN_STATE.recording = config.stash[_PRIOR_RECORDING]


@pytest.fixture(autouse=True)
def _snaptest_run_state(request: pytest.FixtureRequest):
    """Restart the test's sequence counters and restore the recording flag afterwards.

    A rerun of the same test therefore addresses the same reference files.
    """
    RUN_STATE.begin_test(scope_from_node_id(request.node.nodeid) or request.node.name)
    recording = RUN_STATE.recording
    yield
    RUN_STATE.recording = recording
