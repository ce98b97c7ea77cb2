"""
CLI logger adapter - implements LoggerProtocol for command-line usage.

Writes colored messages to stderr so stdout stays free for the selector.
"""

from __future__ import annotations

import typer


class CLILogger:
    """
    Logger implementation for CLI (implements LoggerProtocol from protocols).

    Outputs messages to stderr with optional verbose mode.
    """

    def __init__(self, verbose: bool = False) -> None:
        """
        Initialize CLI logger.

        Args:
            verbose: If True, show info messages. If False, only warnings/errors.
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Log info message (only if verbose)."""
        if self.verbose:
            typer.echo(message, err=True)

    def warning(self, message: str) -> None:
        """Log warning message."""
        typer.secho('Warning: ', fg=typer.colors.YELLOW, err=True, nl=False)
        typer.echo(message, err=True)

    def error(self, message: str) -> None:
        """Log error message."""
        typer.secho('Error: ', fg=typer.colors.RED, err=True, nl=False)
        typer.echo(message, err=True)
