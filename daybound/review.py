from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date

from daybound.clock import Clock, utc_now
from daybound.dates import InvalidDateError, is_in_review_window, local_today, parse_date

logger = logging.getLogger(__name__)

# Minimum gap since the last review before the prompt comes back. Keeps a
# review done on the 29th from re-triggering on the 1st.
REVIEW_THRESHOLD_DAYS = 25


@dataclass(frozen=True)
class ReviewStatus:
    today: date
    in_window: bool
    days_since_last_review: int | None
    due: bool
    threshold_days: int = REVIEW_THRESHOLD_DAYS


def evaluate_monthly_review(
    last_review_date=None,
    *,
    tz=None,
    today=None,
    clock: Clock = utc_now,
) -> ReviewStatus:
    """Decide whether the monthly review prompt is due.

    ``last_review_date`` may be a date, a datetime, an ISO string, or
    None/empty for a user who never reviewed. ``today`` defaults to the
    current date in ``tz`` (or the default timezone). Raises
    ``InvalidDateError`` for unreadable dates.
    """
    current = parse_date(today) if today is not None else local_today(tz, clock=clock)
    last = parse_date(last_review_date) if last_review_date else None
    elapsed = math.inf if last is None else (current - last).days
    in_window = is_in_review_window(current)
    return ReviewStatus(
        today=current,
        in_window=in_window,
        days_since_last_review=None if last is None else int(elapsed),
        due=in_window and elapsed > REVIEW_THRESHOLD_DAYS,
    )


def should_show_monthly_review(last_review_date=None, *, tz=None, today=None, clock: Clock = utc_now) -> bool:
    try:
        return evaluate_monthly_review(last_review_date, tz=tz, today=today, clock=clock).due
    except InvalidDateError as exc:
        logger.warning("Skipping monthly review check: %s", exc)
        return False
