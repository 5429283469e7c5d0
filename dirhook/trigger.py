# trigger.py
from __future__ import annotations

import logging
from typing import Optional

from .dispatch import Outcome, run_command
from .log import ok

logger = logging.getLogger(__name__)


def maybe_trigger(template: Optional[str], any_success: bool) -> Outcome:
  '''
  Fire the trigger command once for a unit of work (a polling round or a
  single native event) when at least one dispatch in it succeeded.
  A failing trigger is logged and reported, never raised.
  '''
  if not template or not template.strip() or not any_success:
    return Outcome.SKIPPED
  logger.info('trigger -> %s', template)
  status = run_command(template)
  if status == 0:
    ok(logger, 'trigger %s', template)
    return Outcome.SUCCESS
  logger.error('trigger %r exited %d', template, status)
  return Outcome.FAILURE
