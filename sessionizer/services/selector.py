"""Fuzzy selection through an external filter such as fzf."""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from sessionizer.exceptions import SelectorError
from sessionizer.protocols import CommandRunner


def select_one(candidates: Sequence[str], runner: CommandRunner, command: Sequence[str]) -> str | None:
    """
    Let the user pick one candidate with the selector command.

    The candidates are written newline-separated to the selector's stdin.
    A selector that exits without printing anything was cancelled by the user,
    whatever its exit status (fzf exits 130 on Esc and 1 on no match).

    Returns:
        The chosen line without its trailing newline, or None on cancel

    Raises:
        SelectorError: If the selector process cannot be started
    """
    input_text = '\n'.join(candidates) + '\n'
    try:
        result = runner.capture(command, input_text)
    except OSError as e:
        raise SelectorError(shlex.join(command), e.strerror or str(e)) from e

    # Only \n ends the line; directory names may contain \r or other separators
    selection = result.stdout.partition('\n')[0]
    return selection or None
