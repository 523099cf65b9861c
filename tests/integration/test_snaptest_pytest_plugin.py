"""Integration tests for the snaptest pytest plugin."""

import pytest

pytest_plugins = ["pytester"]

pytestmark = pytest.mark.integration

TEST_MODULE = """
from snaptest.api.assertion import assert_snapshot
from snaptest.api.config import SnapshotConfig


def test_greeting():
    assert_snapshot("Hello", "lines", config=SnapshotConfig())
"""


@pytest.fixture
def suite(pytester):
    pytester.makeconftest('pytest_plugins = ["snaptest.pytest_plugin"]\n')
    pytester.makepyfile(test_rerun=TEST_MODULE)
    return pytester


def reference_files(pytester):
    return sorted(p.name for p in (pytester.path / "__snapshots__" / "test_rerun").iterdir())


class TestPytestPlugin:
    def test_rerun_in_same_process_compares(self, suite):
        first = suite.runpytest()
        first.assert_outcomes(failed=1)
        first.stdout.fnmatch_lines(["*No reference was found on disk*"])

        second = suite.runpytest()

        second.assert_outcomes(passed=1)
        assert reference_files(suite) == ["test_greeting.0.lines.txt"]

    def test_record_option(self, suite):
        suite.runpytest().assert_outcomes(failed=1)

        recorded = suite.runpytest("--snapshot-record")
        recorded.assert_outcomes(failed=1)
        recorded.stdout.fnmatch_lines(["*Record mode is on*"])

        suite.runpytest().assert_outcomes(passed=1)
        assert reference_files(suite) == ["test_greeting.0.lines.txt"]
