"""CLI - main entry point."""

import logging
import os
import sys
from pathlib import Path

SNAPTEST_LOG_LEVEL_ENV = "SNAPTEST_LOG_LEVEL"
SNAPTEST_LOG_FILE_ENV = "SNAPTEST_LOG_FILE"


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from .. import __version__
    from ..utils.logger import configure_logging
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"snaptest {__version__}")
        return 0

    level_name = os.environ.get(SNAPTEST_LOG_LEVEL_ENV, "WARNING").upper()
    log_file = os.environ.get(SNAPTEST_LOG_FILE_ENV)
    configure_logging(
        getattr(logging, level_name, logging.WARNING),
        log_file=Path(log_file).expanduser() if log_file else None,
    )

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
