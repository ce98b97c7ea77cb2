"""
Sessionizer configuration.

Settings are read from SESSIONIZER_* environment variables only; there is
no configuration file.
"""

from __future__ import annotations

import shlex
from typing import Literal

import pydantic
import pydantic_settings

from sessionizer.exceptions import ConfigurationError


class SessionizerSettings(pydantic_settings.BaseSettings):
    """Environment-driven configuration for the sessionizer CLI."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='SESSIONIZER_',
        case_sensitive=True,  # Fail fast on misconfiguration
    )

    MULTIPLEXER: Literal['zellij', 'tmux'] = 'zellij'
    SELECTOR: str = 'fzf'  # Full command line, e.g. "fzf --height 40% --reverse"
    VERBOSE: bool = False

    @pydantic.field_validator('SELECTOR')
    @classmethod
    def validate_selector(cls, v: str) -> str:
        """Selector must split into at least a program name."""
        try:
            parts = shlex.split(v)
        except ValueError as e:
            raise ValueError(f'SELECTOR is not a valid command line: {e}') from e
        if not parts:
            raise ValueError('SELECTOR must not be empty')
        return v

    @property
    def selector_argv(self) -> list[str]:
        return shlex.split(self.SELECTOR)


def get_settings() -> SessionizerSettings:
    """
    Build settings from the current environment.

    Raises:
        ConfigurationError: If an environment variable fails validation
    """
    try:
        return SessionizerSettings()
    except pydantic.ValidationError as e:
        problems = '; '.join(
            f"SESSIONIZER_{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f'Invalid configuration: {problems}') from e
