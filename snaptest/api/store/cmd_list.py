"""List snapshot artifacts command."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .ArtifactStore import ArtifactStore


def cmd_list(directory: str) -> StageResult:
    """List reference and failure artifacts under a snapshot directory.

    Args:
        directory: Snapshot directory (searched recursively for artifact folders)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        root = Path(directory).expanduser()
        errors: list[str] = []

        yield (0.2, "Scanning snapshot directories...")
        if not root.is_dir():
            errors.append(f"Not a directory: {root}")
            result_obj.result = f"Snapshot directory not found: {root}"
            result_obj.output = {
                "errors": errors,
                "warnings": [],
                "directory": str(root),
                "artifacts": [],
                "count": 0,
            }
            result_obj.success = False
            yield (1.0, "Failed")
            return

        folders = [root, *sorted(p for p in root.rglob("*") if p.is_dir())]
        artifacts = []
        for folder in folders:
            artifacts.extend(entry.to_dict() for entry in ArtifactStore(folder).list_artifacts())

        yield (1.0, "Complete")
        failed = sum(1 for a in artifacts if a["failed"])
        warnings: list[str] = []
        if failed:
            warnings.append(
                f"{failed} failure artifact(s) left behind; run 'snaptest clean {directory}' to remove them"
            )
        result_obj.result = f"Found {len(artifacts) - failed} reference(s) and {failed} failure artifact(s)"
        result_obj.output = {
            "errors": errors,
            "warnings": warnings,
            "directory": str(root),
            "artifacts": artifacts,
            "count": len(artifacts),
        }
        result_obj.success = True

    return StageResult(announce=f"Listing snapshot artifacts in {directory}...", progress_callback=do_work)
