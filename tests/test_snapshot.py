# test_snapshot.py
'''
Tests for snapshot.snapshot

Two-space indent, single quotes everywhere.
'''

from __future__ import annotations

import os
import re
from pathlib import Path

import pytest

from dirhook.errors import SnapshotError
from dirhook.snapshot import is_excluded, snapshot


def _mkdirs(root: Path, *names: str) -> None:
  for n in names:
    (root / n).mkdir()


# ─────────────────────────────────────────────────────────────────────────────
# Listing
# ─────────────────────────────────────────────────────────────────────────────
def test_only_direct_child_directories(root: Path):
  _mkdirs(root, 'b', 'a', 'c')
  (root / 'a' / 'nested').mkdir()
  (root / 'file.txt').write_text('x', encoding='utf-8')

  assert snapshot(root) == [str(root / 'a'), str(root / 'b'), str(root / 'c')]


def test_paths_are_absolute_and_sorted(root: Path, monkeypatch: pytest.MonkeyPatch):
  _mkdirs(root, 'zeta', 'Alpha', 'beta')
  monkeypatch.chdir(root.parent)
  result = snapshot(root.name)
  assert all(os.path.isabs(p) for p in result)
  assert result == sorted(result)
  assert [os.path.basename(p) for p in result] == ['Alpha', 'beta', 'zeta']


def test_dot_directories_are_ordinary(root: Path):
  _mkdirs(root, '.hidden', 'plain')
  assert [os.path.basename(p) for p in snapshot(root)] == ['.hidden', 'plain']


def test_empty_root(root: Path):
  assert snapshot(root) == []


def test_symlinks_are_not_directories(root: Path, tmp_path: Path):
  target = tmp_path / 'elsewhere'
  target.mkdir()
  (root / 'real').mkdir()
  (root / 'link').symlink_to(target, target_is_directory=True)
  (root / 'dangling').symlink_to(tmp_path / 'missing')
  assert snapshot(root) == [str(root / 'real')]


def test_into_is_refilled_in_place(root: Path):
  _mkdirs(root, 'b', 'a')
  buf = ['/stale/entry']
  result = snapshot(root, into=buf)
  assert result is buf
  assert buf == [str(root / 'a'), str(root / 'b')]


def test_into_is_untouched_when_listing_fails(tmp_path: Path):
  buf = ['/w/kept']
  with pytest.raises(SnapshotError):
    snapshot(tmp_path / 'gone', into=buf)
  assert buf == ['/w/kept']


@pytest.mark.parametrize('workers', [1, 2, 64])
def test_worker_count_does_not_change_result(root: Path, workers: int):
  names = [f'd{i:02d}' for i in range(30)]
  _mkdirs(root, *names)
  for i in range(10):
    (root / f'f{i}').write_text('', encoding='utf-8')
  assert snapshot(root, workers=workers) == [str(root / n) for n in names]


# ─────────────────────────────────────────────────────────────────────────────
# Exclusion
# ─────────────────────────────────────────────────────────────────────────────
def test_exclusion_matches_basename(root: Path):
  _mkdirs(root, 'keep', 'tmp-1', '.git', 'also-keep')
  result = snapshot(root, re.compile(r'^tmp-|^\.git$'))
  assert result == [str(root / 'also-keep'), str(root / 'keep')]


def test_exclusion_is_search_not_fullmatch():
  pat = re.compile('bak')
  assert is_excluded('site.bak', pat)
  assert not is_excluded('site', pat)
  assert not is_excluded('anything', None)


def test_exclusion_does_not_see_parent_path(tmp_path: Path):
  r = tmp_path / 'excluded-parent'
  r.mkdir()
  (r / 'child').mkdir()
  assert snapshot(r, re.compile('excluded')) == [str(r / 'child')]


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────
def test_missing_root_raises(tmp_path: Path):
  missing = tmp_path / 'gone'
  with pytest.raises(SnapshotError) as info:
    snapshot(missing)
  assert info.value.root == str(missing)
  assert isinstance(info.value.cause, FileNotFoundError)


def test_root_that_is_a_file_raises(tmp_path: Path):
  f = tmp_path / 'plain.txt'
  f.write_text('x', encoding='utf-8')
  with pytest.raises(SnapshotError):
    snapshot(f)
