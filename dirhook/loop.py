# loop.py
'''
The watch loop: pull batches from a backend, dispatch each event, then
make exactly one trigger decision per batch.

Polling batches are whole rounds; event-driven batches hold one event, so
the trigger fires per round in one mode and per event in the other.
'''

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .backends import Backend, EventDrivenBackend, PollingBackend
from .config import EVENT_DRIVEN, Config
from .dispatch import Outcome, dispatch
from .events import ChangeEvent, EventKind
from .trigger import maybe_trigger

logger = logging.getLogger(__name__)


def build_backend(config: Config) -> Backend:
  if config.backend == EVENT_DRIVEN:
    return EventDrivenBackend(config.root, config.exclude)
  return PollingBackend(config.root, config.exclude, interval=config.interval)


class WatchLoop:
  def __init__(self, config: Config, backend: Optional[Backend] = None) -> None:
    self.config = config
    self.backend = backend or build_backend(config)

  def template_for(self, event: ChangeEvent) -> str:
    if event.kind is EventKind.ADDED:
      return self.config.add_command
    return self.config.delete_command

  def process_batch(self, events: Iterable[ChangeEvent]) -> bool:
    '''Dispatch every event; return True if any of them succeeded.'''
    any_success = False
    for event in events:
      if dispatch(event, self.template_for(event)) is Outcome.SUCCESS:
        any_success = True
    return any_success

  def run(self, max_batches: Optional[int] = None) -> None:
    '''
    Loop until the backend stops yielding (never, outside tests) or
    *max_batches* batches have been handled.
    '''
    logger.info('watching %s (%s)', self.config.root, self.config.backend)
    batches = self.backend.batches()
    try:
      for n, events in enumerate(batches, 1):
        any_success = self.process_batch(events)
        maybe_trigger(self.config.trigger_command, any_success)
        if max_batches is not None and n >= max_batches:
          break
    finally:
      batches.close()
