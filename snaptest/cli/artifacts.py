"""Artifact Typer app factories (list and clean)."""

from typing import Annotated

import typer

from ..api.store.cmd_clean import cmd_clean
from ..api.store.cmd_list import cmd_list
from ._handle_stage_result import _handle_stage_result

_DIRECTORY_HELP = "Directory searched recursively for snapshot artifacts"


def _app(name: str, help_text: str) -> typer.Typer:
    return typer.Typer(
        name=name,
        help=help_text,
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )


def list_artifacts() -> typer.Typer:
    """Create the list Typer app."""
    app = _app("list", "List reference and failure artifacts")

    @app.callback(invoke_without_command=True)
    def callback(directory: Annotated[str, typer.Argument(help=_DIRECTORY_HELP)] = ".") -> None:
        """List reference and failure artifacts."""
        _handle_stage_result(cmd_list)(directory)

    return app


def clean() -> typer.Typer:
    """Create the clean Typer app."""
    app = _app("clean", "Delete failure artifacts")

    @app.callback(invoke_without_command=True)
    def callback(directory: Annotated[str, typer.Argument(help=_DIRECTORY_HELP)] = ".") -> None:
        """Delete failure artifacts left by mismatching assertions."""
        _handle_stage_result(cmd_clean)(directory)

    return app
