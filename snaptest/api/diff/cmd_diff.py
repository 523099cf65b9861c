"""Diff command - compare two snapshot files."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..format.Format import Format
from ..StageResult import StageResult
from .get_engine import get_engine


def cmd_diff(
    reference: str,
    candidate: str,
    strategy: str = "lines",
    options: dict[str, Any] | None = None,
) -> StageResult:
    """Compare a reference artifact with a candidate file.

    Args:
        reference: Path of the reference artifact
        candidate: Path of the candidate (e.g. a ``.failed`` artifact)
        strategy: Diff engine name ("lines", "data" or "image")
        options: Engine options such as ``precision`` or ``context_lines``
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output: dict[str, Any] = {
            "errors": [],
            "strategy": strategy,
            "reference": reference,
            "candidate": candidate,
            "status": None,
            "message": "",
            "attachments": [],
        }

        yield (0.1, "Resolving diff engine...")
        try:
            engine = get_engine(strategy, options)
        except ValueError as e:
            engine = None
            output["errors"].append(str(e))
        else:
            if engine is None:
                output["errors"].append(f"Unknown diff strategy: {strategy}")

        if engine is None:
            result_obj.result = f"Diff failed: {output['errors'][0]}"
            result_obj.output = output
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.3, "Reading files...")
        snapshots = []
        for raw_path in (reference, candidate):
            path = Path(raw_path).expanduser()
            try:
                data = path.read_bytes()
                snapshots.append(Format.from_bytes(engine.kind, data, path.suffix.lstrip(".") or "bin"))
            except (OSError, UnicodeDecodeError) as e:
                output["errors"].append(f"Cannot read {path}: {e}")

        if output["errors"]:
            result_obj.result = f"Diff failed: {output['errors'][0]}"
            result_obj.output = output
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.7, "Comparing...")
        diff_result = engine.compare(*snapshots)
        output.update(diff_result.to_dict())

        result_obj.result = "Snapshots match" if diff_result.is_match else "Snapshots differ"
        result_obj.output = output
        result_obj.success = diff_result.is_match
        yield (1.0, "Complete")

    return StageResult(announce=f"Diffing {reference} vs {candidate}...", progress_callback=do_work)
