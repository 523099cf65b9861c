"""Top-level snaptest configuration."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..store.default_snapshot_directory import DEFAULT_SNAPSHOT_DIRNAME
from .SnapshotConfigError import SnapshotConfigError

CONFIG_ENV = "SNAPTEST_CONFIG"
RECORD_ENV = "SNAPTEST_RECORD"
DIFF_TOOL_ENV = "SNAPTEST_DIFF_TOOL"
DEFAULT_CONFIG_FILENAME = "snaptest.json"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class SnapshotConfig(BaseModel):
    """Settings shared by every assertion in a run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    record: bool = Field(False, description="Record every snapshot instead of comparing")
    record_severity: Literal["fail", "warn"] = Field("fail", description="Whether a recording fails the test or warns")
    diff_tool: str | None = Field(
        None,
        description=(
            "Command launched with reference and candidate paths on mismatch; "
            "the candidate goes to a temp directory when persist_failures is off"
        ),
    )
    timeout_seconds: float = Field(5.0, gt=0, description="Seconds to wait for deferred snapshots")
    persist_failures: bool = Field(True, description="Write mismatching candidates next to the reference")
    snapshot_dirname: str = Field(DEFAULT_SNAPSHOT_DIRNAME, min_length=1, description="Snapshot folder name")

    @classmethod
    def get_config_path(cls) -> Path | None:
        """Path named by SNAPTEST_CONFIG, else ./snaptest.json when present."""
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            return Path(env_path).expanduser()
        default = Path.cwd() / DEFAULT_CONFIG_FILENAME
        return default if default.is_file() else None

    @classmethod
    def load(cls) -> SnapshotConfig:
        """Load config from file (if any), then apply environment overrides.

        Raises:
            SnapshotConfigError: If the file is missing, not JSON, or fails validation
        """
        raw: dict[str, Any] = {}
        path = cls.get_config_path()

        if path is not None:
            if not path.is_file():
                raise SnapshotConfigError([f"Configuration file not found at {path}"])
            try:
                with path.open(encoding="utf-8") as fh:
                    loaded = json.load(fh)
            except json.JSONDecodeError as e:
                raise SnapshotConfigError([f"Invalid JSON in config file {path}: {e}"]) from e
            if not isinstance(loaded, dict):
                raise SnapshotConfigError(
                    [f"config file {path} must contain a JSON object (found: {type(loaded).__name__})"]
                )
            raw.update(loaded)

        raw.update(cls._env_overrides())
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> SnapshotConfig:
        try:
            return cls(**raw)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                loc = error.get("loc", ())
                field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
                msg = error.get("msg", str(e))
                errors.append(f"{field}: {msg}" if field else msg)
            raise SnapshotConfigError(errors or [str(e)]) from e

    @staticmethod
    def _env_overrides() -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        record = os.environ.get(RECORD_ENV)
        if record is not None:
            value = record.strip().lower()
            if value in _TRUE:
                overrides["record"] = True
            elif value in _FALSE:
                overrides["record"] = False
            else:
                raise SnapshotConfigError([f"{RECORD_ENV} must be a boolean flag (found: {record!r})"])
        diff_tool = os.environ.get(DIFF_TOOL_ENV)
        if diff_tool:
            overrides["diff_tool"] = diff_tool
        return overrides

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
