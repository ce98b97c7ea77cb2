"""
Candidate collection - turns CLI path arguments into selectable directories.

An argument is either a literal directory, or a directory followed by the
wildcard suffix ``/*`` which stands for every immediate subdirectory.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from sessionizer.base_model import StrictModel

WILDCARD_SUFFIX = '/*'


class CandidateCollection(StrictModel):
    """Directories eligible for selection plus the warnings raised while collecting them."""

    candidates: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def is_directory(path: str) -> bool:
    """True iff path exists and is a directory (symlinks are followed)."""
    return os.path.isdir(path)


def _expand_wildcard(base: str) -> tuple[list[str], str | None]:
    """Return the subdirectories of base, or a warning if base is unusable."""
    if not is_directory(base):
        return [], f'Directory not found: {base}'

    try:
        with os.scandir(base) as it:
            names = sorted(entry.name for entry in it)
    except OSError:
        return [], f'Could not read directory: {base}'

    subdirs = []
    for name in names:
        full_path = os.path.join(base, name)
        if is_directory(full_path):
            subdirs.append(full_path)
    return subdirs, None


def collect_candidates(args: Iterable[str]) -> CandidateCollection:
    """
    Resolve path arguments into candidate directories.

    Argument order is preserved and duplicates are kept. Invalid arguments
    only produce a warning; an empty result is left for the caller to handle.

    Args:
        args: Literal directory paths or ``base/*`` wildcard arguments

    Returns:
        CandidateCollection whose candidates were all directories when checked

    Examples:
        >>> collect_candidates(['/nonexistent']).warnings
        ('Directory not found: /nonexistent',)
    """
    candidates: list[str] = []
    warnings: list[str] = []

    for arg in args:
        if arg.endswith(WILDCARD_SUFFIX):
            # "/*" alone means the children of the filesystem root
            base = arg[: -len(WILDCARD_SUFFIX)] or '/'
            subdirs, warning = _expand_wildcard(base)
            candidates.extend(subdirs)
            if warning:
                warnings.append(warning)
        elif is_directory(arg):
            candidates.append(arg)
        else:
            warnings.append(f'Directory not found: {arg}')

    return CandidateCollection(candidates=tuple(candidates), warnings=tuple(warnings))
