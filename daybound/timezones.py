from __future__ import annotations

import logging
import os
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import NamedTuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from daybound.clock import Clock, utc_now
from daybound.settings import get_settings

logger = logging.getLogger(__name__)

FALLBACK_TIMEZONE = "UTC"

LOCALTIME_PATH = "/etc/localtime"

_ZONE_ERRORS = (ZoneInfoNotFoundError, ValueError, TypeError, OSError)


class TimezoneOption(NamedTuple):
    value: str
    label: str


COMMON_TIMEZONES = [
    TimezoneOption("America/New_York", "Eastern Time (ET)"),
    TimezoneOption("America/Chicago", "Central Time (CT)"),
    TimezoneOption("America/Denver", "Mountain Time (MT)"),
    TimezoneOption("America/Los_Angeles", "Pacific Time (PT)"),
    TimezoneOption("America/Phoenix", "Arizona Time (MST)"),
    TimezoneOption("America/Anchorage", "Alaska Time (AKST)"),
    TimezoneOption("Pacific/Honolulu", "Hawaii Time (HST)"),
    TimezoneOption("UTC", "UTC (Coordinated Universal Time)"),
    TimezoneOption("Europe/London", "London (GMT/BST)"),
    TimezoneOption("Europe/Paris", "Paris (CET/CEST)"),
    TimezoneOption("Europe/Berlin", "Berlin (CET/CEST)"),
    TimezoneOption("Europe/Rome", "Rome (CET/CEST)"),
    TimezoneOption("Europe/Madrid", "Madrid (CET/CEST)"),
    TimezoneOption("Europe/Amsterdam", "Amsterdam (CET/CEST)"),
    TimezoneOption("Europe/Stockholm", "Stockholm (CET/CEST)"),
    TimezoneOption("Europe/Zurich", "Zurich (CET/CEST)"),
    TimezoneOption("Europe/Vienna", "Vienna (CET/CEST)"),
    TimezoneOption("Europe/Prague", "Prague (CET/CEST)"),
    TimezoneOption("Europe/Warsaw", "Warsaw (CET/CEST)"),
    TimezoneOption("Europe/Athens", "Athens (EET/EEST)"),
    TimezoneOption("Europe/Helsinki", "Helsinki (EET/EEST)"),
    TimezoneOption("Europe/Moscow", "Moscow (MSK)"),
    TimezoneOption("Asia/Tokyo", "Tokyo (JST)"),
    TimezoneOption("Asia/Shanghai", "Shanghai (CST)"),
    TimezoneOption("Asia/Hong_Kong", "Hong Kong (HKT)"),
    TimezoneOption("Asia/Singapore", "Singapore (SGT)"),
    TimezoneOption("Asia/Seoul", "Seoul (KST)"),
    TimezoneOption("Asia/Kolkata", "Mumbai/Delhi (IST)"),
    TimezoneOption("Asia/Dubai", "Dubai (GST)"),
    TimezoneOption("Asia/Bangkok", "Bangkok (ICT)"),
    TimezoneOption("Asia/Jakarta", "Jakarta (WIB)"),
    TimezoneOption("Asia/Manila", "Manila (PHT)"),
    TimezoneOption("Australia/Sydney", "Sydney (AEST/AEDT)"),
    TimezoneOption("Australia/Melbourne", "Melbourne (AEST/AEDT)"),
    TimezoneOption("Australia/Perth", "Perth (AWST)"),
    TimezoneOption("Australia/Adelaide", "Adelaide (ACST/ACDT)"),
    TimezoneOption("Pacific/Auckland", "Auckland (NZST/NZDT)"),
    TimezoneOption("America/Toronto", "Toronto (EST/EDT)"),
    TimezoneOption("America/Vancouver", "Vancouver (PST/PDT)"),
    TimezoneOption("America/Mexico_City", "Mexico City (CST/CDT)"),
    TimezoneOption("America/Sao_Paulo", "São Paulo (BRT)"),
    TimezoneOption("America/Argentina/Buenos_Aires", "Buenos Aires (ART)"),
    TimezoneOption("America/Lima", "Lima (PET)"),
    TimezoneOption("America/Bogota", "Bogotá (COT)"),
    TimezoneOption("America/Santiago", "Santiago (CLT/CLST)"),
    TimezoneOption("Africa/Cairo", "Cairo (EET)"),
    TimezoneOption("Africa/Johannesburg", "Johannesburg (SAST)"),
    TimezoneOption("Africa/Lagos", "Lagos (WAT)"),
    TimezoneOption("Africa/Nairobi", "Nairobi (EAT)"),
]


@lru_cache(maxsize=1)
def _zone_keys_by_lower() -> dict[str, str]:
    return {key.lower(): key for key in available_timezones()}


def _load_zone(tz) -> ZoneInfo | None:
    if not isinstance(tz, str) or not tz.strip():
        return None
    try:
        return ZoneInfo(tz)
    except ZoneInfoNotFoundError:
        # Zone names match in any letter case, e.g. "america/new_york".
        key = _zone_keys_by_lower().get(tz.lower())
    except _ZONE_ERRORS:
        return None
    if key is None:
        return None
    return ZoneInfo(key)


def is_valid_timezone(tz) -> bool:
    return _load_zone(tz) is not None


def resolve_timezone(tz) -> tzinfo:
    """Zone for ``tz``, or UTC when it is missing or unknown.

    Unknown names are logged; an empty or absent name falls back silently.
    """
    if isinstance(tz, tzinfo):
        return tz
    zone = _load_zone(tz)
    if zone is not None:
        return zone
    if tz:
        logger.warning("Invalid timezone %r, falling back to %s", tz, FALLBACK_TIMEZONE)
    return timezone.utc


def timezone_name(zone: tzinfo) -> str:
    key = getattr(zone, "key", None)
    return key or FALLBACK_TIMEZONE


def detect_system_timezone() -> str | None:
    """Zone key the host clock is set to, read from ``/etc/localtime``."""
    target = os.path.realpath(LOCALTIME_PATH)
    marker = "zoneinfo" + os.sep
    index = target.rfind(marker)
    if index == -1:
        return None
    key = target[index + len(marker) :]
    for prefix in ("posix/", "right/"):
        if key.startswith(prefix):
            key = key[len(prefix) :]
    zone = _load_zone(key)
    return zone.key if zone is not None else None


def get_default_timezone() -> str:
    """Configured default zone, then the process ``TZ``, then the host zone, then UTC."""
    for candidate in get_settings().timezone_candidates:
        zone = _load_zone(candidate)
        if zone is not None:
            return zone.key
        logger.warning("Ignoring invalid default timezone %r", candidate)
    return detect_system_timezone() or FALLBACK_TIMEZONE


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def get_current_datetime_in_timezone(tz=None, *, clock: Clock = utc_now) -> datetime:
    return _as_utc(clock()).astimezone(resolve_timezone(tz))


def date_in_timezone(instant: datetime, tz=None) -> date:
    return _as_utc(instant).astimezone(resolve_timezone(tz)).date()


def get_current_date_in_timezone(tz=None, *, clock: Clock = utc_now) -> str:
    return date_in_timezone(clock(), tz).isoformat()


def start_of_day_in_timezone(tz=None, day: date | None = None, *, clock: Clock = utc_now) -> datetime:
    """First instant of the civil ``day`` in ``tz`` (today when omitted).

    Days whose midnight is skipped by a DST jump start at the first wall
    time that exists.
    """
    zone = resolve_timezone(tz)
    if day is None:
        day = date_in_timezone(clock(), zone)
    local = datetime.combine(day, time.min, tzinfo=zone)
    return local.astimezone(timezone.utc).astimezone(zone)


def end_of_day_in_timezone(tz=None, day: date | None = None, *, clock: Clock = utc_now) -> datetime:
    zone = resolve_timezone(tz)
    if day is None:
        day = date_in_timezone(clock(), zone)
    next_start = start_of_day_in_timezone(zone, day + timedelta(days=1))
    return (next_start.astimezone(timezone.utc) - timedelta(microseconds=1)).astimezone(zone)
