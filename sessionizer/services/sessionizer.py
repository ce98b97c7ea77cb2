"""
Sessionizer service - the pick-a-directory-then-launch pipeline.

Guard -> collect -> select -> derive name -> launch. Each external call is
attempted exactly once and nothing is retried.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from sessionizer.base_model import StrictModel
from sessionizer.config.base import SessionizerSettings
from sessionizer.exceptions import NestedSessionError, NoCandidatesError, UsageError
from sessionizer.launcher import launch
from sessionizer.paths import derive_session_name
from sessionizer.protocols import CommandRunner, LoggerProtocol, NullLogger
from sessionizer.services.candidates import collect_candidates
from sessionizer.services.multiplexer import Multiplexer, get_multiplexer
from sessionizer.services.selector import select_one


class SessionizeResult(StrictModel):
    """Outcome of a completed launch."""

    selection: str
    session_name: str
    exit_code: int


class SessionizerService:
    """
    Service that turns path arguments into a launched multiplexer session.

    All external processes go through the injected CommandRunner and all
    user-facing diagnostics through the injected logger.
    """

    def __init__(
        self,
        settings: SessionizerSettings,
        runner: CommandRunner,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.settings = settings
        self.runner = runner
        self.logger = logger or NullLogger()
        self.multiplexer: Multiplexer = get_multiplexer(settings.MULTIPLEXER)

    def check_environment(self, environ: Mapping[str, str] | None = None) -> None:
        """
        Refuse to run from inside a session of the configured multiplexer.

        Raises:
            NestedSessionError: If the multiplexer's marker variable is set and non-empty
        """
        env = os.environ if environ is None else environ
        if self.multiplexer.is_active(env):
            raise NestedSessionError(self.multiplexer.name, self.multiplexer.guard_env_var)

    def collect(self, paths: Sequence[str]) -> list[str]:
        """
        Collect candidate directories, reporting skipped arguments as warnings.

        Raises:
            NoCandidatesError: If no argument resolved to a directory
        """
        collection = collect_candidates(paths)
        for warning in collection.warnings:
            self.logger.warning(warning)

        if not collection.candidates:
            raise NoCandidatesError()

        self.logger.info(f'Collected {len(collection.candidates)} candidate directories')
        return list(collection.candidates)

    def select(self, candidates: Sequence[str]) -> str | None:
        """Run the configured selector over candidates. None means the user cancelled."""
        return select_one(candidates, self.runner, self.settings.selector_argv)

    def run(self, paths: Sequence[str], environ: Mapping[str, str] | None = None) -> SessionizeResult | None:
        """
        Run the whole pipeline.

        Returns:
            SessionizeResult after the multiplexer exits, or None if the user cancelled selection

        Raises:
            NestedSessionError: Already inside the configured multiplexer
            UsageError: No path arguments
            NoCandidatesError: No argument resolved to a directory
            SelectorError: Selector could not be started
            LaunchError: chdir or multiplexer failure
        """
        self.check_environment(environ)

        if not paths:
            raise UsageError('No paths were specified, usage: sessionizer path1 path2/* etc..')

        candidates = self.collect(paths)

        selection = self.select(candidates)
        if selection is None:
            self.logger.info('Selection cancelled')
            return None

        session_name = derive_session_name(selection)
        self.logger.info(f'Launching {self.multiplexer.name} session {session_name!r} in {selection}')
        exit_code = launch(selection, session_name, self.multiplexer, self.runner)

        return SessionizeResult(selection=selection, session_name=session_name, exit_code=exit_code)
