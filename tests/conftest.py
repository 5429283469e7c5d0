# conftest.py
'''Shared fixtures: logger isolation and a command-log helper.'''

from __future__ import annotations

import logging
import shlex
from pathlib import Path

import pytest

from dirhook.config import Config
from dirhook.log import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _reset_logger():
  'Undo setup_logging() between tests.'
  yield
  logger = logging.getLogger(ROOT_LOGGER)
  for h in logger.handlers[:]:
    logger.removeHandler(h)
  logger.setLevel(logging.NOTSET)
  logger.propagate = True


class CommandLog:
  '''A file that shell commands append one line to.'''

  def __init__(self, path: Path) -> None:
    self.path = path
    self.q = shlex.quote(str(path))

  def cmd(self, text: str, status: int = 0) -> str:
    return f'echo {text} >> {self.q}; exit {status}'

  def lines(self) -> list[str]:
    if not self.path.exists():
      return []
    return self.path.read_text(encoding='utf-8').splitlines()


@pytest.fixture
def cmdlog(tmp_path: Path) -> CommandLog:
  return CommandLog(tmp_path / 'commands.log')


@pytest.fixture
def root(tmp_path: Path) -> Path:
  r = tmp_path / 'watch'
  r.mkdir()
  return r


@pytest.fixture
def make_config(root: Path, cmdlog: CommandLog):
  def _make(add_status: int = 0, delete_status: int = 0, trigger_status: int | None = 0, **kw) -> Config:
    trigger = None if trigger_status is None else cmdlog.cmd('trigger', trigger_status)
    return Config(
      root=str(root),
      add_command=cmdlog.cmd('add %n', add_status),
      delete_command=cmdlog.cmd('delete %n', delete_status),
      trigger_command=trigger,
      **kw,
    )
  return _make
