from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from daybound.logging_config import configure_logging
from daybound.routes import calendar, review, timezones
from daybound.settings import get_settings


def create_app() -> FastAPI:
    configure_logging(get_settings().log_level)
    app = FastAPI(title="Daybound API", version="0.1.0")

    app.include_router(calendar.router)
    app.include_router(review.router)
    app.include_router(timezones.router)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logging.getLogger("daybound").exception("Unhandled exception: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Internal error"})

    @app.get("/health")
    async def health():
        return {"ok": True}

    return app


app = create_app()
