# errors.py
'''
Exception hierarchy.

    DirhookError
    ├── ConfigError          bad flags, missing root, bad regex …
    │   └── BackendUnavailable
    └── SnapshotError        watch root could not be listed
'''

from __future__ import annotations


class DirhookError(Exception):
  pass


class ConfigError(DirhookError):
  '''Startup-fatal configuration problem; the CLI exits with status 1.'''


class BackendUnavailable(ConfigError):
  '''The event-driven backend has no native watch mechanism on this host.'''


class SnapshotError(DirhookError):
  def __init__(self, root: str, cause: OSError) -> None:
    super().__init__(f'cannot list {root}: {cause.strerror or cause}')
    self.root = root
    self.cause = cause
