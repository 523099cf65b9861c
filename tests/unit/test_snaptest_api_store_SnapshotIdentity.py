"""Unit tests for snaptest.api.store.SnapshotIdentity and path helpers."""

from pathlib import Path

import pytest

from snaptest.api.store import SnapshotIdentity, default_snapshot_directory, sanitize_path_component

pytestmark = pytest.mark.unit


class TestSnapshotIdentity:
    def test_unnamed_uses_index(self):
        assert SnapshotIdentity("test_a", None, 2, "dump").identifier == "2"

    def test_named_first_use(self):
        assert SnapshotIdentity("test_a", "header", 0, "dump").identifier == "header"

    def test_named_repeat(self):
        assert SnapshotIdentity("test_a", "header", 1, "dump").identifier == "header-1"

    def test_requires_scope(self):
        with pytest.raises(ValueError, match="test_scope"):
            SnapshotIdentity("", None, 0, "dump")

    def test_rejects_empty_name(self):
        with pytest.raises(ValueError, match="assertion_name"):
            SnapshotIdentity("test_a", "", 0, "dump")

    def test_rejects_negative_index(self):
        with pytest.raises(ValueError, match="sequence_index"):
            SnapshotIdentity("test_a", None, -1, "dump")

    @pytest.mark.parametrize("name", ["0", "12", "header-1", "header -2"])
    def test_rejects_reserved_names(self, name):
        with pytest.raises(ValueError, match="reserved"):
            SnapshotIdentity("test_a", name, 0, "dump")

    @pytest.mark.parametrize("name", ["v2", "header-x", "1st"])
    def test_accepts_names_near_reserved_shapes(self, name):
        assert SnapshotIdentity("test_a", name, 0, "dump").identifier == name


class TestSanitizePathComponent:
    def test_keeps_safe_characters(self):
        assert sanitize_path_component("test_Thing-1") == "test_Thing-1"

    def test_replaces_runs(self):
        assert sanitize_path_component("TestA.test_b[x / y]") == "TestA_test_b_x_y_"

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            sanitize_path_component("")


class TestDefaultSnapshotDirectory:
    def test_next_to_test_file(self):
        assert default_snapshot_directory(Path("/repo/tests/test_views.py")) == Path(
            "/repo/tests/__snapshots__/test_views"
        )

    def test_custom_dirname(self):
        assert default_snapshot_directory("/repo/tests/test_views.py", "snapshots") == Path(
            "/repo/tests/snapshots/test_views"
        )
