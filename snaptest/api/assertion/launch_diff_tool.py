"""Launch an external diff viewer."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from ...utils.logger import get_logger

logger = get_logger("assertion")


def diff_command(diff_tool: str, reference: Path, candidate: Path) -> str:
    """Shell-quoted command line for viewing a mismatch."""
    return " ".join([diff_tool, shlex.quote(str(reference)), shlex.quote(str(candidate))])


def launch_diff_tool(diff_tool: str, reference: Path, candidate: Path) -> bool:
    """Start the diff tool without waiting for it.

    Its exit status is never inspected and launch problems are only logged,
    so the tool cannot change the outcome of an assertion.

    Returns:
        True if the process was started
    """
    try:
        args = shlex.split(diff_tool) + [str(reference), str(candidate)]
    except ValueError as exc:
        logger.warning("Invalid diff tool command %r: %s", diff_tool, exc)
        return False
    if not args[:-2]:
        logger.warning("Diff tool command is empty")
        return False

    try:
        subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.warning("Failed to launch diff tool %r: %s", args[0], exc)
        return False
    logger.info("Launched diff tool: %s", diff_command(diff_tool, reference, candidate))
    return True
