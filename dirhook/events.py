# events.py
'''
Raw filesystem events → Added / Removed directory events.

Public calls
------------
    normalize(raw, exclusion=None)       -> ChangeEvent | None
    from_watchdog(event, root)           -> list[RawEvent]

Each raw event yields at most one ChangeEvent, in arrival order; nothing
is buffered.  Non-directory and modify events are dropped silently.
'''

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from .snapshot import is_excluded

CREATE = 'create'
DELETE = 'delete'
MOVED_FROM = 'moved_from'
MOVED_TO = 'moved_to'
MODIFY = 'modify'

_ADD_TYPES = frozenset({CREATE, MOVED_TO})
_REMOVE_TYPES = frozenset({DELETE, MOVED_FROM})


class EventKind(enum.Enum):
  ADDED = 'added'
  REMOVED = 'removed'


@dataclass(frozen=True)
class RawEvent:
  types: FrozenSet[str]
  is_dir: bool
  path: str


@dataclass(frozen=True)
class ChangeEvent:
  path: str
  name: str
  kind: EventKind

  @classmethod
  def added(cls, path: str) -> 'ChangeEvent':
    return cls(path, os.path.basename(path), EventKind.ADDED)

  @classmethod
  def removed(cls, path: str) -> 'ChangeEvent':
    return cls(path, os.path.basename(path), EventKind.REMOVED)


# ─────────────────────────────────────────────────────────────────────────────
# Normalizer
# ─────────────────────────────────────────────────────────────────────────────
def normalize(raw: RawEvent, exclusion: Optional[re.Pattern] = None) -> Optional[ChangeEvent]:
  if not raw.is_dir:
    return None
  path = raw.path.rstrip(os.sep) or raw.path
  name = os.path.basename(path)
  if is_excluded(name, exclusion):
    return None
  if raw.types & _ADD_TYPES:
    return ChangeEvent(path, name, EventKind.ADDED)
  if raw.types & _REMOVE_TYPES:
    return ChangeEvent(path, name, EventKind.REMOVED)
  return None


# ─────────────────────────────────────────────────────────────────────────────
# watchdog adapter
# ─────────────────────────────────────────────────────────────────────────────
_WATCHDOG_TYPES = {
  'created': CREATE,
  'deleted': DELETE,
  'modified': MODIFY,
}


def _decode(path) -> str:
  if isinstance(path, bytes):
    return os.fsdecode(path)
  return path or ''


def from_watchdog(event, root: str) -> List[RawEvent]:
  '''
  Translate one watchdog ``FileSystemEvent``.  A move becomes a moved_from
  for the source and a moved_to for the destination; either half is kept
  only when it is a direct child of *root*.
  '''
  root = os.path.abspath(root)
  is_dir = bool(event.is_directory)
  src = _decode(event.src_path)

  if event.event_type == 'moved':
    dest = _decode(getattr(event, 'dest_path', ''))
    halves = [(MOVED_FROM, src), (MOVED_TO, dest)]
  elif event.event_type in _WATCHDOG_TYPES:
    halves = [(_WATCHDOG_TYPES[event.event_type], src)]
  else:                              # opened / closed / closed_no_write
    return []

  return [
    RawEvent(frozenset({kind}), is_dir, path)
    for kind, path in halves
    if path and os.path.dirname(os.path.abspath(path)) == root
  ]
