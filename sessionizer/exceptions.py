"""
Shared exceptions for sessionizer.

Domain-specific exceptions raised by the services and turned into
messages and exit codes by the CLI.

Exception Hierarchy:
    SessionizerError (base)
    ├── NestedSessionError (already inside the target multiplexer)
    ├── UsageError (no path arguments)
    ├── NoCandidatesError (no argument resolved to a directory)
    ├── SelectorError (fuzzy selector could not be started)
    ├── LaunchError (chdir or multiplexer failure)
    └── ConfigurationError (invalid environment configuration)
"""

from __future__ import annotations


class SessionizerError(Exception):
    """Base exception for all sessionizer errors."""


class NestedSessionError(SessionizerError):
    """Raised when running inside a session of the target multiplexer."""

    def __init__(self, multiplexer: str, env_var: str) -> None:
        self.multiplexer = multiplexer
        self.env_var = env_var
        super().__init__(f'{multiplexer} environment detected ({env_var} is set)')


class UsageError(SessionizerError):
    """Raised when no path arguments were given."""


class NoCandidatesError(SessionizerError):
    """Raised when no argument resolved to an existing directory."""

    def __init__(self) -> None:
        super().__init__('No valid directories found to choose from.')


class SelectorError(SessionizerError):
    """Raised when the fuzzy selector process cannot be started."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f'Failed to execute {command}: {reason}')


class LaunchError(SessionizerError):
    """Raised when the multiplexer session cannot be launched."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)


class ConfigurationError(SessionizerError):
    """Raised when environment configuration fails validation."""
