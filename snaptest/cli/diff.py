"""Diff Typer app factory."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from ..api.diff.cmd_diff import cmd_diff
from ._handle_stage_result import _handle_stage_result


def diff() -> typer.Typer:
    """Create and configure the diff Typer app."""
    app = typer.Typer(
        name="diff",
        help="Compare a reference artifact with a candidate file",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        reference: Annotated[str | None, typer.Argument(help="Reference artifact path")] = None,
        candidate: Annotated[str | None, typer.Argument(help="Candidate file path")] = None,
        strategy: Annotated[str, typer.Option("--strategy", "-s", help="Diff strategy: lines, data, image")] = "lines",
        precision: Annotated[
            float | None, typer.Option("--precision", "-p", help="Image agreement threshold in [0, 1]")
        ] = None,
        context_lines: Annotated[
            int | None, typer.Option("--context-lines", help="Unified diff context lines")
        ] = None,
    ) -> None:
        """Compare two snapshot files with a diff engine."""
        if ctx.invoked_subcommand is None and (reference is None or candidate is None):
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(1)

        assert reference is not None
        assert candidate is not None

        options: dict[str, Any] = {}
        if precision is not None:
            options["precision"] = precision
        if context_lines is not None:
            options["context_lines"] = context_lines

        _handle_stage_result(cmd_diff)(reference, candidate, strategy, options)

    return app
