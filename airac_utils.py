#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Clock-relative AIRAC helpers: the cycle in effect now, upcoming cycles and
cycle boundaries.
"""

import logging
from datetime import datetime, timedelta, timezone

from airac import AIRAC_CYCLE_DURATION, CYCLE_MAX, DATE_FORMAT, Cycle, to_utc

logger = logging.getLogger(__name__)


def get_current_airac(now=None):
    """Return the current AIRAC cycle and the start of the next one as (cycle, next_start).

    next_start is always after now, also in the last representable cycle.
    """
    now = datetime.now(timezone.utc) if now is None else to_utc(now)

    current = Cycle.from_date(now)
    next_start = current.effective + AIRAC_CYCLE_DURATION

    logger.debug("Now: %s", now.isoformat())
    logger.debug("Current AIRAC: %s (effective %s)", current, current.effective.date())
    logger.debug("Next AIRAC start: %s", next_start.date())
    return current, next_start


def list_future_airacs(months=12, now=None):
    """
    Returns a list of (AIRAC code, effective date) for the current cycle and
    every cycle starting within the next `months` months (30 days each).
    """
    now = datetime.now(timezone.utc) if now is None else to_utc(now)
    current, _ = get_current_airac(now)
    end_date = now + timedelta(days=months * 30)

    result = []
    cycle = current
    while cycle.effective <= end_date:
        result.append((str(cycle), cycle.effective.strftime(DATE_FORMAT)))
        if cycle.number == CYCLE_MAX:
            break
        cycle += 1

    logger.debug("Upcoming AIRAC cycles: %s", ", ".join(code for code, _ in result))
    return result


def is_airac_start(today=None):
    """Return True if today is the effective date of an AIRAC cycle."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    elif isinstance(today, datetime):
        today = to_utc(today).date()

    match = Cycle.from_date(today).effective.date() == today
    logger.debug("Today: %s, is AIRAC boundary: %s", today, match)
    return match
