# snapshot.py
'''
List the immediate child directories of a watch root.

    snapshot(root, exclusion=None, workers=None, into=None) -> list[str]
        • root      : directory to list (only direct children are reported)
        • exclusion : compiled regex matched against each child's *basename*
        • workers   : thread count for the per-entry type checks
                      (default: os.cpu_count())
        • into      : list to refill in place instead of allocating one;
                      left untouched when listing fails
Returns a sorted, duplicate-free list of absolute paths.  The listing is
fully collected before returning; an unreadable root raises SnapshotError.
Symlinks are not followed, so a link to a directory is not a directory,
matching what the native event backend reports.
'''

from __future__ import annotations

import os
import re
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from .errors import SnapshotError


def is_excluded(name: str, exclusion: Optional[re.Pattern]) -> bool:
  '''Shared filter for both backends: regex *search* on the basename.'''
  return exclusion is not None and exclusion.search(name) is not None


def _is_dir(entry: os.DirEntry) -> bool:
  try:
    return entry.is_dir(follow_symlinks=False)
  except OSError:                    # vanished between scandir and stat
    return False


def snapshot(
  root: str | os.PathLike,
  exclusion: Optional[re.Pattern] = None,
  workers: Optional[int] = None,
  into: Optional[List[str]] = None,
) -> List[str]:
  root = os.path.abspath(os.fspath(root))
  try:
    with os.scandir(root) as it:
      entries = [e for e in it if not is_excluded(e.name, exclusion)]
  except OSError as exc:
    raise SnapshotError(root, exc) from exc

  flags: List[bool] = []
  if entries:
    workers = max(1, min(workers or os.cpu_count() or 1, len(entries)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
      flags = list(pool.map(_is_dir, entries))

  # scandir never repeats a name, so sorting is all the dedup needed
  out = into if into is not None else []
  out.clear()
  out.extend(os.path.join(root, e.name) for e, d in zip(entries, flags) if d)
  out.sort()
  return out
