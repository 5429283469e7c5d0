# dir_watchdog.py
'''
Native directory-event source based on the `watchdog` library.

API
---
native_available()                    ->  bool
watch_dir(root, on_event)             ->  stop_fn
    • root      : directory whose *direct* children are watched
    • on_event  : callback(RawEvent) called from the observer thread,
                  once per raw event, in arrival order
Returns:
    stop_fn()   : stop the observer thread and join it
'''

from __future__ import annotations

import os
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.polling import PollingObserver

from .events import RawEvent, from_watchdog


def native_available() -> bool:
  '''watchdog falls back to stat polling when no kernel API is usable.'''
  return not issubclass(Observer, PollingObserver)


class _DirHandler(FileSystemEventHandler):
  def __init__(self, root: str, callback: Callable[[RawEvent], None]) -> None:
    super().__init__()
    self._root = root
    self._cb = callback

  def on_any_event(self, event: FileSystemEvent) -> None:  # type: ignore[override]
    for raw in from_watchdog(event, self._root):
      self._cb(raw)


def watch_dir(
  root: str | os.PathLike,
  on_event: Callable[[RawEvent], None],
) -> Callable[[], None]:
  root = os.path.abspath(os.fspath(root))
  handler = _DirHandler(root, on_event)

  observer = Observer()
  observer.schedule(handler, root, recursive=False)
  observer.start()

  def stop() -> None:
    observer.stop()
    observer.join()

  return stop
