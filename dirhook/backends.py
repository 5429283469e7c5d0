# backends.py
'''
Change-discovery backends.

Both variants expose ``batches()``, an endless iterator of
``list[ChangeEvent]``.  Each yielded list is one trigger scope:

    PollingBackend      one list per round (possibly empty)
    EventDrivenBackend  one single-event list per native event

The first list is always the initial sync: every directory already
present, reported as added.
'''

from __future__ import annotations

import abc
import logging
import queue
import re
import time
from typing import Callable, Iterator, List, Optional

from . import dir_watchdog
from .diff import diff
from .errors import BackendUnavailable, SnapshotError
from .events import ChangeEvent, EventKind, RawEvent, normalize
from .snapshot import snapshot

logger = logging.getLogger(__name__)

Batch = List[ChangeEvent]


class Backend(abc.ABC):
  def __init__(self, root: str, exclusion: Optional[re.Pattern] = None) -> None:
    self.root = root
    self.exclusion = exclusion

  @abc.abstractmethod
  def batches(self) -> Iterator[Batch]:
    ...

  def _initial_sync(self, into: Optional[List[str]] = None) -> Batch:
    # SnapshotError here is fatal: there is no baseline to fall back on
    paths = snapshot(self.root, self.exclusion, into=into)
    logger.info('initial sync: %d director%s in %s',
                len(paths), 'y' if len(paths) == 1 else 'ies', self.root)
    return [ChangeEvent.added(p) for p in paths]


# ─────────────────────────────────────────────────────────────────────────────
# Polling
# ─────────────────────────────────────────────────────────────────────────────
class PollingBackend(Backend):
  '''Snapshot every *interval* seconds and diff against the last round.'''

  def __init__(
    self,
    root: str,
    exclusion: Optional[re.Pattern] = None,
    interval: int = 1,
    sleep: Callable[[float], None] = time.sleep,
  ) -> None:
    super().__init__(root, exclusion)
    self.interval = interval
    self._sleep = sleep
    # snapshot() refills these in place; swapped after each diff
    self._previous: List[str] = []
    self._current: List[str] = []

  def batches(self) -> Iterator[Batch]:
    yield self._initial_sync(into=self._previous)

    while True:
      self._sleep(self.interval)
      try:
        snapshot(self.root, self.exclusion, into=self._current)
      except SnapshotError as exc:
        logger.error('%s; skipping round, keeping previous listing', exc)
        continue
      added, removed = diff(self._previous, self._current)
      self._previous, self._current = self._current, self._previous
      if added or removed:
        logger.info('round: %d added, %d removed', len(added), len(removed))
      yield [ChangeEvent.removed(p) for p in removed] + [ChangeEvent.added(p) for p in added]


# ─────────────────────────────────────────────────────────────────────────────
# Event driven
# ─────────────────────────────────────────────────────────────────────────────
class EventDrivenBackend(Backend):
  '''
  Native events via watchdog.  The observer thread only enqueues raw
  events; normalization happens on the consuming thread, in FIFO order.
  '''

  def __init__(self, root: str, exclusion: Optional[re.Pattern] = None) -> None:
    self.check_available()
    super().__init__(root, exclusion)

  @staticmethod
  def check_available() -> None:
    if not dir_watchdog.native_available():
      raise BackendUnavailable('event-driven backend needs a native filesystem watch API '
                               '(inotify, FSEvents, kqueue or ReadDirectoryChangesW)')

  def batches(self) -> Iterator[Batch]:
    pending: 'queue.Queue[RawEvent]' = queue.Queue()
    # start watching before the initial listing so nothing slips between them
    stop = dir_watchdog.watch_dir(self.root, pending.put)
    try:
      initial = self._initial_sync()
      # a directory made during the listing is both listed and queued
      known = {ev.path for ev in initial}
      yield initial
      while True:
        event = normalize(pending.get(), self.exclusion)
        if event is None:
          continue
        if event.kind is EventKind.ADDED:
          if event.path in known:
            continue
          known.add(event.path)
        else:
          if event.path not in known:
            continue
          known.discard(event.path)
        yield [event]
    finally:
      stop()
