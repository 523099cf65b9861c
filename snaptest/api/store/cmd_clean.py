"""Delete failure artifacts command."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .ArtifactIOError import ArtifactIOError
from .ArtifactStore import ArtifactStore


def cmd_clean(directory: str) -> StageResult:
    """Remove ``.failed`` artifacts left behind by mismatching assertions."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        root = Path(directory).expanduser()
        errors: list[str] = []
        removed: list[str] = []

        yield (0.2, "Scanning snapshot directories...")
        if not root.is_dir():
            errors.append(f"Not a directory: {root}")
        else:
            folders = [root, *sorted(p for p in root.rglob("*") if p.is_dir())]
            for folder in folders:
                try:
                    removed.extend(str(p) for p in ArtifactStore(folder).clean_failures())
                except ArtifactIOError as exc:
                    errors.append(str(exc))

        yield (1.0, "Complete" if not errors else "Failed")
        result_obj.result = (
            f"Removed {len(removed)} failure artifact(s)" if not errors else f"Clean failed: {errors[0]}"
        )
        result_obj.output = {"errors": errors, "directory": str(root), "removed": removed, "count": len(removed)}
        result_obj.success = not errors

    return StageResult(announce=f"Cleaning failure artifacts in {directory}...", progress_callback=do_work)
