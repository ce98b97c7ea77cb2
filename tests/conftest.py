"""Shared fixtures: a fake command runner and a clean environment."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from sessionizer.protocols import CompletedCommand


class FakeRunner:
    """CommandRunner that records calls instead of starting processes."""

    def __init__(
        self,
        selection: str = '',
        selector_returncode: int = 0,
        multiplexer_returncode: int = 0,
        missing: Sequence[str] = (),
    ) -> None:
        self.selection = selection
        self.selector_returncode = selector_returncode
        self.multiplexer_returncode = multiplexer_returncode
        self.missing = set(missing)
        self.captured: list[tuple[list[str], str]] = []
        self.ran: list[list[str]] = []

    def _check_exists(self, argv: Sequence[str]) -> None:
        if argv[0] in self.missing:
            raise FileNotFoundError(2, 'No such file or directory', argv[0])

    def capture(self, argv: Sequence[str], input_text: str) -> CompletedCommand:
        self._check_exists(argv)
        self.captured.append((list(argv), input_text))
        stdout = f'{self.selection}\n' if self.selection else ''
        return CompletedCommand(returncode=self.selector_returncode, stdout=stdout)

    def run(self, argv: Sequence[str]) -> int:
        self._check_exists(argv)
        self.ran.append(list(argv))
        return self.multiplexer_returncode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests may run inside tmux or zellij; never inherit their markers or our settings."""
    for var in ('ZELLIJ', 'TMUX', 'SESSIONIZER_MULTIPLEXER', 'SESSIONIZER_SELECTOR', 'SESSIONIZER_VERBOSE'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def project_tree(tmp_path):
    """tmp_path/projA, tmp_path/group/{x,y} and a plain file tmp_path/group/notes.txt."""
    (tmp_path / 'projA').mkdir()
    group = tmp_path / 'group'
    group.mkdir()
    (group / 'x').mkdir()
    (group / 'y').mkdir()
    (group / 'notes.txt').write_text('not a directory\n')
    return tmp_path


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner
