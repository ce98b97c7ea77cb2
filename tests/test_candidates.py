"""Tests for candidate collection."""

from __future__ import annotations

import os

from sessionizer.services.candidates import collect_candidates, is_directory


def test_is_directory(tmp_path) -> None:
    file_path = tmp_path / 'file.txt'
    file_path.write_text('x')

    assert is_directory(str(tmp_path))
    assert not is_directory(str(file_path))
    assert not is_directory(str(tmp_path / 'missing'))


def test_every_candidate_is_a_directory(project_tree) -> None:
    result = collect_candidates([str(project_tree / 'projA'), f'{project_tree}/group/*', str(project_tree)])

    assert result.candidates
    assert all(is_directory(c) for c in result.candidates)


def test_wildcard_skips_files_silently(project_tree) -> None:
    group = project_tree / 'group'
    result = collect_candidates([f'{group}/*'])

    assert set(result.candidates) == {os.path.join(str(group), 'x'), os.path.join(str(group), 'y')}
    assert result.warnings == ()


def test_wildcard_missing_base_warns_once(tmp_path) -> None:
    base = str(tmp_path / 'nope')
    result = collect_candidates([f'{base}/*'])

    assert result.candidates == ()
    assert result.warnings == (f'Directory not found: {base}',)


def test_wildcard_on_file_base_warns(project_tree) -> None:
    base = str(project_tree / 'group' / 'notes.txt')
    result = collect_candidates([f'{base}/*'])

    assert result.candidates == ()
    assert result.warnings == (f'Directory not found: {base}',)


def test_missing_literal_warns_verbatim() -> None:
    result = collect_candidates(['does/not/exist'])

    assert result.candidates == ()
    assert result.warnings == ('Directory not found: does/not/exist',)


def test_literal_kept_verbatim_and_order_preserved(project_tree, monkeypatch) -> None:
    monkeypatch.chdir(project_tree)
    result = collect_candidates(['projA', 'missing', 'group', 'projA'])

    assert result.candidates == ('projA', 'group', 'projA')
    assert result.warnings == ('Directory not found: missing',)


def test_mixed_arguments_end_to_end(project_tree) -> None:
    proj = str(project_tree / 'projA')
    group = str(project_tree / 'group')
    result = collect_candidates([proj, f'{group}/*'])

    assert result.candidates[0] == proj
    assert set(result.candidates[1:]) == {f'{group}/x', f'{group}/y'}
    assert len(result.candidates) == 3


def test_empty_wildcard_directory(tmp_path) -> None:
    empty = tmp_path / 'empty'
    empty.mkdir()
    result = collect_candidates([f'{empty}/*'])

    assert result.candidates == ()
    assert result.warnings == ()


def test_symlinked_directory_counts(project_tree) -> None:
    link = project_tree / 'group' / 'link'
    link.symlink_to(project_tree / 'projA', target_is_directory=True)

    result = collect_candidates([f'{project_tree}/group/*'])

    assert str(link) in result.candidates


def test_unreadable_wildcard_base_warns_and_continues(project_tree, monkeypatch) -> None:
    locked = str(project_tree / 'group')
    real_scandir = os.scandir

    def scandir(path):
        if path == locked:
            raise PermissionError(13, 'Permission denied', path)
        return real_scandir(path)

    monkeypatch.setattr(os, 'scandir', scandir)
    result = collect_candidates([f'{locked}/*', str(project_tree / 'projA')])

    assert result.candidates == (str(project_tree / 'projA'),)
    assert result.warnings == (f'Could not read directory: {locked}',)
