"""
Multiplexer launcher.

Changes into the selected directory and attaches to (or creates) the
named session.
"""

from __future__ import annotations

import os
import shlex

from sessionizer.exceptions import LaunchError
from sessionizer.protocols import CommandRunner
from sessionizer.services.multiplexer import Multiplexer


def launch(selection: str, session_name: str, multiplexer: Multiplexer, runner: CommandRunner) -> int:
    """
    Attach to session_name from inside selection, creating the session if absent.

    The working directory is changed first and never restored; the process
    exits right after the multiplexer does. Blocks until the multiplexer exits.

    Args:
        selection: Directory the session is rooted in
        session_name: Name of the session to attach to or create
        multiplexer: Multiplexer definition providing the attach command
        runner: Runs the multiplexer with inherited stdio

    Returns:
        0 once the multiplexer exited successfully

    Raises:
        LaunchError: If chdir fails, the multiplexer cannot be started, or it exits nonzero
    """
    try:
        os.chdir(selection)
    except OSError as e:
        raise LaunchError(f'Cannot change directory to {selection}: {e.strerror or e}') from e

    argv = multiplexer.attach_command(session_name)
    try:
        returncode = runner.run(argv)
    except OSError as e:
        raise LaunchError(f'Failed to launch {multiplexer.name} session: {e.strerror or e}') from e

    if returncode != 0:
        raise LaunchError(
            f'Failed to launch {multiplexer.name} session ({shlex.join(argv)} exited with {returncode})',
            returncode=returncode,
        )
    return 0
