# config.py
'''
Validated, immutable-by-convention run configuration.

    Config.from_args(namespace) -> Config      raises ConfigError
'''

from __future__ import annotations

import os
import re
from typing import Optional

from .errors import ConfigError

POLLING = 'polling'
EVENT_DRIVEN = 'event-driven'
BACKENDS = (POLLING, EVENT_DRIVEN)


class Config:
  def __init__(
    self,
    root: str,
    add_command: str,
    delete_command: str,
    exclude: Optional[re.Pattern] = None,
    trigger_command: Optional[str] = None,
    backend: str = POLLING,
    interval: int = 1,
    verbose: bool = False,
    color: bool = False,
  ) -> None:
    self.root = root
    self.add_command = add_command
    self.delete_command = delete_command
    self.exclude = exclude
    self.trigger_command = trigger_command
    self.backend = backend
    self.interval = interval
    self.verbose = verbose
    self.color = color

  @classmethod
  def from_args(cls, args) -> 'Config':
    root = os.path.abspath(os.fspath(args.watch))
    if not os.path.exists(root):
      raise ConfigError(f'watch directory does not exist: {root}')
    if not os.path.isdir(root):
      raise ConfigError(f'watch path is not a directory: {root}')

    for flag, value in (('--add', args.add), ('--delete', args.delete)):
      if not value or not value.strip():
        raise ConfigError(f'{flag} command must not be empty')

    if args.backend not in BACKENDS:
      raise ConfigError(f'unknown backend {args.backend!r}')
    if args.interval < 1:
      raise ConfigError(f'interval must be a whole number of seconds >= 1, got {args.interval}')

    exclude = None
    if args.exclude:
      try:
        exclude = re.compile(args.exclude)
      except re.error as exc:
        raise ConfigError(f'invalid --exclude pattern {args.exclude!r}: {exc}') from exc

    if args.backend == EVENT_DRIVEN:
      from .backends import EventDrivenBackend
      EventDrivenBackend.check_available()

    return cls(
      root=root,
      add_command=args.add,
      delete_command=args.delete,
      exclude=exclude,
      trigger_command=args.trigger or None,
      backend=args.backend,
      interval=args.interval,
      verbose=args.verbose,
      color=args.color,
    )
