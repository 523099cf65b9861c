"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .SnapshotConfig import SnapshotConfig
from .SnapshotConfigError import SnapshotConfigError


def cmd_show() -> StageResult:
    """Show the effective configuration after file and environment overrides."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = SnapshotConfig.get_config_path()
        try:
            config = SnapshotConfig.load()
        except SnapshotConfigError as e:
            yield (1.0, "Failed")
            result_obj.result = "Configuration is invalid"
            result_obj.output = {
                "errors": e.errors,
                "config_path": str(config_path) if config_path else None,
                "content": {},
            }
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "Loaded configuration" if config_path else "Using default configuration"
        result_obj.output = {
            "errors": [],
            "config_path": str(config_path) if config_path else None,
            "content": config.to_dict(),
        }
        result_obj.success = True

    return StageResult(announce="Showing snaptest configuration...", progress_callback=do_work)
