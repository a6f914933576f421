from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from daybound import dates
from daybound.clock import Clock, get_clock
from daybound.review import evaluate_monthly_review
from daybound.schemas import ReviewCompletePayload, ReviewCompleteResponse, ReviewStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/review/monthly", response_model=ReviewStatusResponse)
async def monthly_review_status(
    last_review_date: Optional[str] = Query(None),
    timezone: Optional[str] = Query(None),
    clock: Clock = Depends(get_clock),
):
    try:
        status = evaluate_monthly_review(last_review_date, tz=timezone, clock=clock)
    except dates.InvalidDateError:
        raise HTTPException(status_code=400, detail="Invalid date format")
    return {
        "today": status.today.isoformat(),
        "in_window": status.in_window,
        "days_since_last_review": status.days_since_last_review,
        "threshold_days": status.threshold_days,
        "due": status.due,
    }


@router.post("/v1/review/monthly/complete", response_model=ReviewCompleteResponse)
async def complete_monthly_review(payload: ReviewCompletePayload, clock: Clock = Depends(get_clock)):
    today = dates.local_today(payload.timezone, clock=clock)
    logger.info("Monthly review completed for %s", today.isoformat())
    return {"last_monthly_review_at": today.isoformat()}
