"""
Shared protocols for sessionizer services.

Services depend on these protocols instead of concrete implementations so
the pipeline can run against a fake command runner or a silent logger.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from sessionizer.base_model import StrictModel


class CompletedCommand(StrictModel):
    """Result of an external command whose stdout was captured."""

    returncode: int
    stdout: str


class CommandRunner(Protocol):
    """
    Protocol for running external programs.

    Implementations:
    - SubprocessRunner (services/process.py): real processes
    - FakeRunner (tests/conftest.py): records calls, returns canned output
    """

    def capture(self, argv: Sequence[str], input_text: str) -> CompletedCommand:
        """
        Run argv with input_text on stdin and capture stdout.

        stderr stays attached to the terminal so interactive programs can draw on it.

        Raises:
            OSError: If the program cannot be started
        """
        ...

    def run(self, argv: Sequence[str]) -> int:
        """
        Run argv with inherited stdin/stdout/stderr and wait for it.

        Returns:
            The process exit status

        Raises:
            OSError: If the program cannot be started
        """
        ...


class LoggerProtocol(Protocol):
    """
    Protocol for logger - enables services to work with any logging implementation.

    Implementations:
    - CLILogger (cli/logger.py): Colored messages on stderr with optional verbose mode
    - NullLogger (below): No-op implementation for when logging is optional
    """

    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class NullLogger:
    """
    No-op logger implementation for when logging is optional.

    Use this when a function requires a LoggerProtocol but the caller
    doesn't need logging output.
    """

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass
