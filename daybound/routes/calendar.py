from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from daybound import dates
from daybound.clock import Clock, get_clock
from daybound.schemas import DayPositionResponse, MonthResponse, TodayResponse
from daybound.timezones import get_default_timezone, resolve_timezone, timezone_name

router = APIRouter()


@router.get("/v1/calendar/today", response_model=TodayResponse)
async def calendar_today(timezone: Optional[str] = Query(None), clock: Clock = Depends(get_clock)):
    zone = resolve_timezone(timezone)
    return {
        "timezone": timezone,
        "resolved_timezone": timezone_name(zone),
        "today": dates.get_today(zone, clock=clock),
        "tomorrow": dates.get_tomorrow(zone, clock=clock),
        "yesterday": dates.get_yesterday(zone, clock=clock),
    }


@router.get("/v1/calendar/day/{day}", response_model=DayPositionResponse)
async def calendar_day(day: str):
    try:
        value = dates.parse_date(day)
    except dates.InvalidDateError:
        raise HTTPException(status_code=400, detail="Invalid date format")
    return {
        "date": value.isoformat(),
        "is_end_of_month": dates.is_end_of_month(value),
        "is_last_three_days_of_month": dates.is_last_three_days_of_month(value),
        "is_first_two_days_of_month": dates.is_first_two_days_of_month(value),
        "last_day_of_month": dates.last_day_of_month(value.year, value.month),
        "display": dates.format_date_in_timezone(value),
    }


@router.get("/v1/calendar/month", response_model=MonthResponse)
async def calendar_month(timezone: Optional[str] = Query(None), clock: Clock = Depends(get_clock)):
    zone_name = timezone_name(resolve_timezone(timezone or get_default_timezone()))
    today = dates.local_today(zone_name, clock=clock)
    next_month = dates.get_next_month(zone_name, clock=clock)
    start, end = dates.month_bounds(today.year, today.month)
    return {
        "timezone": zone_name,
        "month": today.month,
        "year": today.year,
        "next_month": next_month._asdict(),
        "start": start.isoformat(),
        "end": end.isoformat(),
    }
