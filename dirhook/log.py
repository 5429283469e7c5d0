# log.py
'''
Tagged console logging.

Every line is ``[tag] message`` with tag in {info, ok, warn, err}.
info/ok go to stdout and only show up with --verbose; warn/err go to
stderr unconditionally.  --color styles the tag through rich.

    setup_logging(verbose=False, color=False) -> logging.Logger
'''

from __future__ import annotations

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape

OK = 25
logging.addLevelName(OK, 'OK')

ROOT_LOGGER = 'dirhook'

_STYLES: Dict[str, str] = {
  'info': 'bold blue',
  'ok': 'bold green',
  'warn': 'bold yellow',
  'err': 'bold red',
}


def printable(text: str) -> str:
  '''
  Undecodable bytes in file names arrive as lone surrogates (PEP 383) and
  cannot be encoded by any console; show them as U+FFFD instead.
  '''
  return text.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')


def tag_for(levelno: int) -> str:
  if levelno >= logging.ERROR:
    return 'err'
  if levelno >= logging.WARNING:
    return 'warn'
  if levelno >= OK:
    return 'ok'
  return 'info'


# ─────────────────────────────────────────────────────────────────────────────
# Handler
# ─────────────────────────────────────────────────────────────────────────────
class TaggedHandler(logging.Handler):
  '''Route records to a stdout or stderr rich console by severity.'''

  def __init__(self, color: bool = False,
               out: Optional[Console] = None, err: Optional[Console] = None) -> None:
    super().__init__()
    self.color = color
    self.out = out or _console(color, stderr=False)
    self.err = err or _console(color, stderr=True)

  def emit(self, record: logging.LogRecord) -> None:
    try:
      tag = tag_for(record.levelno)
      msg = escape(printable(self.format(record)))
      label = f'[{_STYLES[tag]}]\\[{tag}][/]' if self.color else f'\\[{tag}]'
      console = self.err if record.levelno >= logging.WARNING else self.out
      console.print(f'{label} {msg}', soft_wrap=True)
    except Exception:
      self.handleError(record)


def _console(color: bool, stderr: bool) -> Console:
  # no file= : rich resolves sys.stdout / sys.stderr at write time
  return Console(
    stderr=stderr,
    no_color=not color,
    force_terminal=True if color else None,
    color_system='standard' if color else None,
    highlight=False,
    emoji=False,
  )


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────
def setup_logging(verbose: bool = False, color: bool = False) -> logging.Logger:
  '''Install the tagged handler on the ``dirhook`` logger and return it.'''
  logger = logging.getLogger(ROOT_LOGGER)
  for h in logger.handlers[:]:
    logger.removeHandler(h)
  handler = TaggedHandler(color=color)
  handler.setFormatter(logging.Formatter('%(message)s'))
  logger.addHandler(handler)
  logger.setLevel(logging.INFO if verbose else logging.WARNING)
  logger.propagate = False
  return logger


def ok(logger: logging.Logger, msg: str, *args) -> None:
  logger.log(OK, msg, *args)
