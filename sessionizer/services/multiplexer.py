"""
Terminal multiplexer definitions.

Each multiplexer is described by the binary to run, the environment
variable it exports inside its own sessions, and the argument template for
"attach to this session, creating it if absent".
"""

from __future__ import annotations

from collections.abc import Mapping

from sessionizer.base_model import StrictModel

SESSION_PLACEHOLDER = '{session}'


class Multiplexer(StrictModel):
    """An external terminal multiplexer that sessions are launched in."""

    name: str
    binary: str
    guard_env_var: str
    attach_args: tuple[str, ...]

    def attach_command(self, session_name: str) -> list[str]:
        """Build the attach-or-create argv for session_name."""
        return [self.binary] + [session_name if arg == SESSION_PLACEHOLDER else arg for arg in self.attach_args]

    def is_active(self, environ: Mapping[str, str]) -> bool:
        """True when environ belongs to a process running inside one of our sessions."""
        return bool(environ.get(self.guard_env_var))


MULTIPLEXERS: Mapping[str, Multiplexer] = {
    'zellij': Multiplexer(
        name='Zellij',
        binary='zellij',
        guard_env_var='ZELLIJ',
        attach_args=('attach', SESSION_PLACEHOLDER, '-c'),
    ),
    'tmux': Multiplexer(
        name='tmux',
        binary='tmux',
        guard_env_var='TMUX',
        attach_args=('new-session', '-A', '-s', SESSION_PLACEHOLDER),
    ),
}


def get_multiplexer(key: str) -> Multiplexer:
    """
    Look up a multiplexer definition by its configuration key.

    Raises:
        KeyError: If key is not a known multiplexer
    """
    return MULTIPLEXERS[key]
