# diff.py
'''
Sorted-set difference of two directory snapshots.

    diff(previous, current) -> (added, removed)

Both inputs must be sorted and duplicate-free (as returned by
snapshot.snapshot); the walk is a single linear merge.
'''

from __future__ import annotations

from typing import List, Sequence, Tuple


def diff(previous: Sequence[str], current: Sequence[str]) -> Tuple[List[str], List[str]]:
  added: List[str] = []
  removed: List[str] = []
  i = j = 0
  while i < len(previous) and j < len(current):
    p, c = previous[i], current[j]
    if p == c:
      i += 1
      j += 1
    elif p < c:
      removed.append(p)
      i += 1
    else:
      added.append(c)
      j += 1
  removed.extend(previous[i:])
  added.extend(current[j:])
  return added, removed
