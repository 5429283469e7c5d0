import argparse
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from . import __version__
from .config import BACKENDS, POLLING


class _Parser(argparse.ArgumentParser):
  '''argparse exits with 2 on usage errors; configuration errors exit 1 here.'''

  def error(self, message: str) -> NoReturn:
    self.print_usage(sys.stderr)
    self.exit(1, f'{self.prog}: error: {message}\n')


def _interval(text: str) -> int:
  try:
    value = int(text)
  except ValueError:
    raise argparse.ArgumentTypeError(f'not a whole number of seconds: {text!r}')
  if value < 1:
    raise argparse.ArgumentTypeError(f'must be >= 1, got {value}')
  return value


def parse_argv(argv: Optional[List[str]] = None) -> argparse.Namespace:
  '''
  Parse command-line arguments for *dirhook*.

  Parameters
  ----------
  argv
    A custom argument list (mainly for testing).  When None the
    function uses ``sys.argv[1:]`` automatically.

  Returns
  -------
  argparse.Namespace
    • watch    : Directory whose immediate subdirectories are watched
    • add      : Command template run for each new directory
    • delete   : Command template run for each removed directory
    • exclude  : Optional regex; matching directory names are ignored
    • trigger  : Optional command run after successful dispatches
    • backend  : 'polling' (default) or 'event-driven'
    • interval : Polling interval in whole seconds
    • verbose  : Bool flag - print info / ok lines
    • color    : Bool flag - colorize log tags
  '''
  parser = _Parser(
      prog='dirhook',
      description='Run commands when subdirectories appear in or vanish from a directory.',
      epilog='In command templates %p expands to the full path and %n to the directory name.',
  )

  parser.add_argument(
      '--watch',
      '-w',
      required=True,
      type=Path,
      metavar='DIR',
      help='Directory to watch.',
  )
  parser.add_argument(
      '--add',
      '-a',
      required=True,
      metavar='CMD',
      help='Command to run when a directory is added.',
  )
  parser.add_argument(
      '--delete',
      '-d',
      required=True,
      metavar='CMD',
      help='Command to run when a directory is removed.',
  )
  parser.add_argument(
      '--exclude',
      '-e',
      default=None,
      metavar='REGEX',
      help='Ignore directories whose name matches this regular expression.',
  )
  parser.add_argument(
      '--trigger',
      '-t',
      default=None,
      metavar='CMD',
      help='Command to run once after a round (or event) with a successful add/delete.',
  )

  # backend selection
  parser.add_argument(
      '--backend',
      '-b',
      choices=BACKENDS,
      default=POLLING,
      help='Change detection strategy (default: polling).',
  )
  parser.add_argument(
      '--interval',
      '-i',
      type=_interval,
      default=1,
      metavar='SEC',
      help='Seconds between polling rounds (default: 1).',
  )

  # output
  parser.add_argument(
      '--verbose',
      '-v',
      action='store_true',
      help='Also print info and ok lines.',
  )
  parser.add_argument(
      '--color',
      '-c',
      action='store_true',
      help='Colorize log tags.',
  )
  parser.add_argument(
      '--version',
      '-V',
      action='version',
      version=f'%(prog)s {__version__}',
  )

  try:
    import argcomplete
    argcomplete.autocomplete(parser)
  except ImportError:
    pass
  return parser.parse_args(argv)
