"""Unit tests for snaptest.api.store.cmd_list and cmd_clean."""

import pytest

from snaptest.api.format import Format
from snaptest.api.store import ArtifactStore
from snaptest.api.store.cmd_clean import cmd_clean
from snaptest.api.store.cmd_list import cmd_list
from tests.conftest import run_cmd

pytestmark = pytest.mark.unit


@pytest.fixture
def snapshots(tmp_path):
    root = tmp_path / "tests"
    store = ArtifactStore(root / "__snapshots__" / "test_views")
    store.write(store.directory / "test_home.0.dump.txt", Format.text("a"))
    store.write(store.directory / "test_home.header.image.png", Format.binary(b"png", "png"))
    store.write(store.directory / "test_home.0.dump.failed.txt", Format.text("b"))
    return root


class TestCmdList:
    def test_lists_recursively(self, snapshots):
        result = run_cmd(cmd_list, str(snapshots))

        assert result.success
        assert result.output["count"] == 3
        assert result.result == "Found 2 reference(s) and 1 failure artifact(s)"
        identifiers = {(a["identifier"], a["strategy"], a["failed"]) for a in result.output["artifacts"]}
        assert identifiers == {("0", "dump", False), ("header", "image", False), ("0", "dump", True)}
        assert result.output["warnings"] == [
            f"1 failure artifact(s) left behind; run 'snaptest clean {snapshots}' to remove them"
        ]

    def test_missing_directory(self, tmp_path):
        result = run_cmd(cmd_list, str(tmp_path / "nowhere"))
        assert not result.success
        assert result.output["errors"]
        assert result.output["artifacts"] == []


class TestCmdClean:
    def test_removes_failures_only(self, snapshots):
        result = run_cmd(cmd_clean, str(snapshots))

        assert result.success
        assert result.output["count"] == 1
        assert result.output["removed"][0].endswith("test_home.0.dump.failed.txt")
        remaining = sorted(p.name for p in (snapshots / "__snapshots__" / "test_views").iterdir())
        assert remaining == ["test_home.0.dump.txt", "test_home.header.image.png"]

    def test_nothing_to_clean(self, tmp_path):
        result = run_cmd(cmd_clean, str(tmp_path))
        assert result.success
        assert result.output["removed"] == []

    def test_missing_directory(self, tmp_path):
        result = run_cmd(cmd_clean, str(tmp_path / "nowhere"))
        assert not result.success
        assert result.result.startswith("Clean failed")
