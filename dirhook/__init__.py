# dirhook/__init__.py
from importlib.metadata import version, PackageNotFoundError

try:
  __version__ = version(__name__)
except PackageNotFoundError:      # development mode
  __version__ = '0.0.0.dev0'

from .config import Config                            # re-export
from .diff import diff                                # re-export
from .dispatch import Outcome, dispatch, render       # re-export
from .events import ChangeEvent, EventKind, normalize # re-export
from .loop import WatchLoop, build_backend            # re-export
from .snapshot import snapshot                        # re-export
from .trigger import maybe_trigger                    # re-export

__all__ = [
  'Config',
  'diff',
  'Outcome', 'dispatch', 'render',
  'ChangeEvent', 'EventKind', 'normalize',
  'WatchLoop', 'build_backend',
  'snapshot',
  'maybe_trigger',
]
