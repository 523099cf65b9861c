"""Config Typer app factory."""

import typer

from ..api.config.cmd_show import cmd_show
from ._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Show the effective configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback() -> None:
        """Show configuration after file and environment overrides."""
        _handle_stage_result(cmd_show)()

    return app
