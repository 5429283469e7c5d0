# dispatch.py
'''
Render a command template and run it through the shell.

    render(template, path, name)  -> str       pure, no execution
    run_command(command)          -> int       exit status
    dispatch(event, template)     -> Outcome

Placeholders: ``%p`` -> absolute path, ``%n`` → basename.  They are
replaced verbatim, without shell quoting.
'''

from __future__ import annotations

import enum
import logging
import subprocess

from .events import ChangeEvent
from .log import ok

logger = logging.getLogger(__name__)

# status reported when the shell itself cannot be spawned
SPAWN_FAILED = 127


class Outcome(enum.Enum):
  SUCCESS = 'success'
  FAILURE = 'failure'
  SKIPPED = 'skipped'


def render(template: str, path: str, name: str) -> str:
  return template.replace('%p', path).replace('%n', name)


def run_command(command: str) -> int:
  '''Run *command* with ``sh -c``; stdout/stderr are inherited.'''
  if not command or not command.strip():
    raise ValueError('refusing to run an empty command')
  try:
    return subprocess.run(command, shell=True, check=False).returncode
  except OSError as exc:
    logger.error('could not spawn shell for %r: %s', command, exc)
    return SPAWN_FAILED


def dispatch(event: ChangeEvent, template: str) -> Outcome:
  command = render(template, event.path, event.name)
  logger.info('%s %s -> %s', event.kind.value, event.path, command)
  status = run_command(command)
  if status == 0:
    ok(logger, '%s %s', event.kind.value, event.path)
    return Outcome.SUCCESS
  logger.error('command %r exited %d for %s', command, status, event.path)
  return Outcome.FAILURE
