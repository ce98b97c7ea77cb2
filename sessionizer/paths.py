"""
Session naming for selected directories.

Multiplexers commonly reject dots in session names, so the directory's
final path segment is used with every `.` replaced by `_`.
"""

from __future__ import annotations

__all__ = ['derive_session_name']


def derive_session_name(selection: str) -> str:
    """
    Derive a multiplexer session name from a selected path.

    Pure string manipulation; the filesystem is not consulted.

    Args:
        selection: Path chosen by the user

    Returns:
        Text after the last `/` (the whole selection if there is none), dots replaced

    Examples:
        >>> derive_session_name("/home/user/my.project")
        'my_project'

        >>> derive_session_name("relative-name")
        'relative-name'
    """
    _, _, name = selection.rpartition('/')
    return name.replace('.', '_')
