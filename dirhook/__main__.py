# __main__.py
import sys

from .config import Config
from .dev_argparse import parse_argv
from .errors import ConfigError, SnapshotError
from .log import setup_logging
from .loop import WatchLoop


def main() -> None:
  args = parse_argv()
  logger = setup_logging(verbose=args.verbose, color=args.color)
  try:
    cfg = Config.from_args(args)
    WatchLoop(cfg).run()
  except (ConfigError, SnapshotError) as exc:
    logger.error('%s', exc)
    sys.exit(1)
  except KeyboardInterrupt:
    logger.warning('interrupted')
    sys.exit(130)


if __name__ == '__main__':
  main()
