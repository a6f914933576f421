from __future__ import annotations

from daybound.timezones import COMMON_TIMEZONES

NY_NIGHT = "2024-01-31T23:30:00-05:00"


def test_health(make_client) -> None:
    client = make_client(NY_NIGHT)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_today_in_timezone(make_client) -> None:
    client = make_client(NY_NIGHT)
    response = client.get("/v1/calendar/today", params={"timezone": "America/New_York"})
    assert response.status_code == 200
    assert response.json() == {
        "timezone": "America/New_York",
        "resolved_timezone": "America/New_York",
        "today": "2024-01-31",
        "tomorrow": "2024-02-01",
        "yesterday": "2024-01-30",
    }


def test_today_with_empty_timezone_uses_utc(make_client) -> None:
    client = make_client(NY_NIGHT)
    payload = client.get("/v1/calendar/today", params={"timezone": ""}).json()
    assert payload["resolved_timezone"] == "UTC"
    assert payload["today"] == "2024-02-01"


def test_today_with_invalid_timezone_uses_utc(make_client) -> None:
    client = make_client(NY_NIGHT)
    payload = client.get("/v1/calendar/today", params={"timezone": "Invalid/Timezone"}).json()
    assert payload["timezone"] == "Invalid/Timezone"
    assert payload["resolved_timezone"] == "UTC"
    assert payload["today"] == "2024-02-01"


def test_day_position(make_client) -> None:
    client = make_client(NY_NIGHT)
    payload = client.get("/v1/calendar/day/2024-02-29").json()
    assert payload == {
        "date": "2024-02-29",
        "is_end_of_month": True,
        "is_last_three_days_of_month": True,
        "is_first_two_days_of_month": False,
        "last_day_of_month": 29,
        "display": "Thursday, February 29, 2024",
    }


def test_day_position_rejects_bad_dates(make_client) -> None:
    client = make_client(NY_NIGHT)
    response = client.get("/v1/calendar/day/2024-02-30")
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid date format"}


def test_month_in_timezone(make_client) -> None:
    client = make_client("2024-12-31T20:00:00-05:00")
    ny = client.get("/v1/calendar/month", params={"timezone": "America/New_York"}).json()
    assert ny["month"] == 12
    assert ny["year"] == 2024
    assert ny["next_month"] == {"month": 1, "year": 2025}
    assert ny["start"] == "2024-12-01"
    assert ny["end"] == "2024-12-31"

    utc = client.get("/v1/calendar/month").json()
    assert utc["timezone"] == "UTC"
    assert utc["next_month"] == {"month": 2, "year": 2025}


def test_monthly_review_status(make_client) -> None:
    client = make_client("2024-02-01T15:00:00+00:00")
    response = client.get("/v1/review/monthly", params={"last_review_date": "2024-01-05", "timezone": "UTC"})
    assert response.status_code == 200
    assert response.json() == {
        "today": "2024-02-01",
        "in_window": True,
        "days_since_last_review": 27,
        "threshold_days": 25,
        "due": True,
    }


def test_monthly_review_status_never_reviewed(make_client) -> None:
    client = make_client("2024-01-15T15:00:00+00:00")
    payload = client.get("/v1/review/monthly").json()
    assert payload["days_since_last_review"] is None
    assert payload["in_window"] is False
    assert payload["due"] is False


def test_monthly_review_status_rejects_bad_dates(make_client) -> None:
    client = make_client(NY_NIGHT)
    response = client.get("/v1/review/monthly", params={"last_review_date": "yesterday"})
    assert response.status_code == 400


def test_complete_monthly_review(make_client) -> None:
    client = make_client(NY_NIGHT)
    response = client.post("/v1/review/monthly/complete", json={"timezone": "America/New_York"})
    assert response.status_code == 200
    assert response.json() == {"last_monthly_review_at": "2024-01-31"}


def test_list_timezones(make_client) -> None:
    client = make_client(NY_NIGHT)
    payload = client.get("/v1/timezones").json()
    assert payload["default_timezone"] == "UTC"
    assert len(payload["items"]) == len(COMMON_TIMEZONES)
    assert {"value": "America/New_York", "label": "Eastern Time (ET)"} in payload["items"]


def test_validate_timezone(make_client) -> None:
    client = make_client(NY_NIGHT)
    assert client.get("/v1/timezones/validate", params={"timezone": "Asia/Tokyo"}).json() == {
        "timezone": "Asia/Tokyo",
        "valid": True,
    }
    assert client.get("/v1/timezones/validate", params={"timezone": "Invalid/Timezone"}).json()["valid"] is False
    assert client.get("/v1/timezones/validate").json() == {"timezone": "", "valid": False}


def test_day_position_on_the_last_representable_date(make_client) -> None:
    client = make_client(NY_NIGHT)
    response = client.get("/v1/calendar/day/9999-12-31")
    assert response.status_code == 200
    payload = response.json()
    assert payload["is_end_of_month"] is True
    assert payload["is_last_three_days_of_month"] is True
    assert payload["last_day_of_month"] == 31


def test_day_position_rejects_week_dates(make_client) -> None:
    client = make_client(NY_NIGHT)
    assert client.get("/v1/calendar/day/2024-W05-3").status_code == 400
    assert client.get("/v1/calendar/day/20240131").status_code == 400


def test_today_accepts_lowercase_timezone(make_client) -> None:
    client = make_client(NY_NIGHT)
    payload = client.get("/v1/calendar/today", params={"timezone": "america/new_york"}).json()
    assert payload["resolved_timezone"] == "America/New_York"
    assert payload["today"] == "2024-01-31"
