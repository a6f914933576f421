from __future__ import annotations

import calendar
import logging
import re
from datetime import date, datetime, timedelta
from typing import NamedTuple

from daybound.clock import Clock, utc_now
from daybound.timezones import date_in_timezone, get_default_timezone

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}(?:$|[T ])")


class InvalidDateError(ValueError):
    pass


class MonthRef(NamedTuple):
    month: int
    year: int


def parse_date(value) -> date:
    """Civil date from a ``date``, a ``datetime`` or an ISO string.

    Strings keep the date they spell out: ``2024-01-31`` and
    ``2024-01-31T23:30:00-05:00`` both give January 31st.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"Unsupported date value: {value!r}")
    text = value.strip()
    if not _ISO_DATE.match(text):
        raise InvalidDateError(f"Invalid date format: {value!r}")
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date format: {value!r}") from exc


def format_date(value) -> str:
    return parse_date(value).isoformat()


def add_days(value, days: int) -> date:
    return parse_date(value) + timedelta(days=days)


def days_between(start, end) -> int:
    return (parse_date(end) - parse_date(start)).days


def _first_of_next_month(year: int, month: int) -> date:
    if month == 12:
        return date(year + 1, 1, 1)
    return date(year, month + 1, 1)


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, last_day_of_month(year, month))


# Today/tomorrow/yesterday fall back to UTC when no zone is given.
def get_today(tz=None, *, clock: Clock = utc_now) -> str:
    return date_in_timezone(clock(), tz).isoformat()


def get_tomorrow(tz=None, *, clock: Clock = utc_now) -> str:
    return (date_in_timezone(clock(), tz) + timedelta(days=1)).isoformat()


def get_yesterday(tz=None, *, clock: Clock = utc_now) -> str:
    return (date_in_timezone(clock(), tz) - timedelta(days=1)).isoformat()


def local_today(tz=None, *, clock: Clock = utc_now) -> date:
    """Today in ``tz``, or in the default timezone when none is given."""
    return date_in_timezone(clock(), tz or get_default_timezone())


def _resolve_day(value, tz, clock: Clock) -> date:
    if value is None:
        return local_today(tz, clock=clock)
    return parse_date(value)


def is_end_of_month(value=None, *, tz=None, clock: Clock = utc_now) -> bool:
    day = _resolve_day(value, tz, clock)
    return day.day == last_day_of_month(day.year, day.month)


def is_last_three_days_of_month(value=None, *, tz=None, clock: Clock = utc_now) -> bool:
    day = _resolve_day(value, tz, clock)
    return day.day >= last_day_of_month(day.year, day.month) - 2


def is_first_two_days_of_month(value=None, *, tz=None, clock: Clock = utc_now) -> bool:
    day = _resolve_day(value, tz, clock)
    return day.day <= 2


def is_in_review_window(value=None, *, tz=None, clock: Clock = utc_now) -> bool:
    day = _resolve_day(value, tz, clock)
    return is_last_three_days_of_month(day) or is_first_two_days_of_month(day)


def get_current_month(tz=None, *, clock: Clock = utc_now) -> int:
    return local_today(tz, clock=clock).month


def get_current_year(tz=None, *, clock: Clock = utc_now) -> int:
    return local_today(tz, clock=clock).year


def get_next_month(tz=None, *, clock: Clock = utc_now) -> MonthRef:
    today = local_today(tz, clock=clock)
    first = _first_of_next_month(today.year, today.month)
    return MonthRef(month=first.month, year=first.year)


def format_date_in_timezone(value, tz=None) -> str:
    """Long display form, e.g. ``Wednesday, January 31, 2024``.

    Instants (datetimes and timestamp strings) are shown as the day they
    fall on in ``tz``. Values that cannot be read are returned as text.
    """
    try:
        if isinstance(value, datetime):
            day = date_in_timezone(value, tz)
        elif isinstance(value, str) and len(value.strip()) > 10 and _ISO_DATE.match(value.strip()):
            day = date_in_timezone(datetime.fromisoformat(value.strip()), tz)
        else:
            day = parse_date(value)
    except ValueError as exc:
        logger.warning("Cannot format date %r: %s", value, exc)
        return str(value)
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"
