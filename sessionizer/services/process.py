"""Run external programs (selector, multiplexer) with subprocess."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from sessionizer.protocols import CompletedCommand


class SubprocessRunner:
    """CommandRunner backed by subprocess.run. No timeouts: both collaborators are interactive."""

    def capture(self, argv: Sequence[str], input_text: str) -> CompletedCommand:
        """
        Pipe input_text to argv and capture stdout; stderr stays on the terminal.

        Text crosses the pipe in the filesystem encoding with surrogate escapes,
        so paths that are not valid UTF-8 come back unchanged. No newline
        translation is applied.
        """
        result = subprocess.run(
            list(argv),
            input=os.fsencode(input_text),
            stdout=subprocess.PIPE,
        )
        return CompletedCommand(returncode=result.returncode, stdout=os.fsdecode(result.stdout or b''))

    def run(self, argv: Sequence[str]) -> int:
        """Run argv attached to the current terminal and return its exit status."""
        return subprocess.run(list(argv)).returncode
