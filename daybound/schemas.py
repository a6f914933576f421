from __future__ import annotations

from typing import Optional, List

from pydantic import BaseModel


class TodayResponse(BaseModel):
    timezone: Optional[str]
    resolved_timezone: str
    today: str
    tomorrow: str
    yesterday: str


class DayPositionResponse(BaseModel):
    date: str
    is_end_of_month: bool
    is_last_three_days_of_month: bool
    is_first_two_days_of_month: bool
    last_day_of_month: int
    display: str


class MonthRefResponse(BaseModel):
    month: int
    year: int


class MonthResponse(BaseModel):
    timezone: str
    month: int
    year: int
    next_month: MonthRefResponse
    start: str
    end: str


class ReviewStatusResponse(BaseModel):
    today: str
    in_window: bool
    days_since_last_review: Optional[int]
    threshold_days: int
    due: bool


class ReviewCompletePayload(BaseModel):
    timezone: Optional[str] = None


class ReviewCompleteResponse(BaseModel):
    last_monthly_review_at: str


class TimezoneOptionResponse(BaseModel):
    value: str
    label: str


class TimezoneListResponse(BaseModel):
    default_timezone: str
    items: List[TimezoneOptionResponse]


class TimezoneValidationResponse(BaseModel):
    timezone: str
    valid: bool
