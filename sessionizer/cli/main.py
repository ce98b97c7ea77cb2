#!/usr/bin/env python3
"""
Command-line interface for sessionizer.

Pick a project directory with a fuzzy selector and attach to a multiplexer
session named after it.
"""

from __future__ import annotations

import typer

from sessionizer.cli.logger import CLILogger
from sessionizer.config.base import get_settings
from sessionizer.exceptions import (
    ConfigurationError,
    NestedSessionError,
    NoCandidatesError,
    SessionizerError,
    UsageError,
)
from sessionizer.protocols import CommandRunner
from sessionizer.services.process import SubprocessRunner
from sessionizer.services.sessionizer import SessionizerService

app = typer.Typer(
    name='sessionizer',
    help='Pick a project directory with a fuzzy finder and open a multiplexer session in it',
    add_completion=False,
)


def get_runner() -> CommandRunner:
    """Command runner used for the selector and the multiplexer."""
    return SubprocessRunner()


def _explain_nested_session(e: NestedSessionError) -> None:
    typer.secho(f'{e.multiplexer} environment detected!', fg=typer.colors.RED, err=True)
    typer.echo(f'Script only works outside of {e.multiplexer}.', err=True)
    typer.echo(err=True)
    typer.echo(f'This is because nested {e.multiplexer} sessions are not recommended,', err=True)
    typer.echo(f'and it is currently not possible to change {e.multiplexer} sessions', err=True)
    typer.echo('from within a script.', err=True)
    typer.echo(err=True)
    typer.echo(f'Exit {e.multiplexer} and try again,', err=True)
    typer.echo('or unset ', err=True, nl=False)
    typer.secho(e.env_var, fg=typer.colors.GREEN, err=True, nl=False)
    typer.echo(' env var to force this script to work.', err=True)


@app.command()
def sessionize(
    paths: list[str] | None = typer.Argument(
        None, help='Directories, or base/* for every subdirectory of base', show_default=False
    ),
) -> None:
    """Select a directory and attach to (or create) a session named after it.

    The multiplexer and selector come from the environment:

        SESSIONIZER_MULTIPLEXER=tmux SESSIONIZER_SELECTOR='fzf --reverse' sessionizer ~/src/*
    """
    try:
        settings = get_settings()
    except ConfigurationError as e:
        CLILogger().error(str(e))
        raise typer.Exit(1)

    logger = CLILogger(verbose=settings.VERBOSE)
    service = SessionizerService(settings=settings, runner=get_runner(), logger=logger)

    try:
        result = service.run(paths or [])
    except NestedSessionError as e:
        _explain_nested_session(e)
        raise typer.Exit(1)
    except (UsageError, NoCandidatesError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except SessionizerError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if result is None:
        return  # Selection cancelled; not a failure

    raise typer.Exit(result.exit_code)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
