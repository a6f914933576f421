from __future__ import annotations

from fastapi import APIRouter, Query

from daybound.schemas import TimezoneListResponse, TimezoneValidationResponse
from daybound.timezones import COMMON_TIMEZONES, get_default_timezone, is_valid_timezone

router = APIRouter()


@router.get("/v1/timezones", response_model=TimezoneListResponse)
async def list_timezones():
    return {
        "default_timezone": get_default_timezone(),
        "items": [option._asdict() for option in COMMON_TIMEZONES],
    }


@router.get("/v1/timezones/validate", response_model=TimezoneValidationResponse)
async def validate_timezone(timezone: str = Query("")):
    return {"timezone": timezone, "valid": is_valid_timezone(timezone)}
