"""
FastAPI application factory.

* Registers routes for check-ins, reports and health.
* Renders ``AttendanceError`` subclasses as ``{"success": false, "message": ...}``.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import checkins, health, reports
from src.api.schemas import ErrorResponse
from src.config import settings
from src.domain.exceptions import AttendanceError

logging.basicConfig(level=settings.log_level)


async def attendance_error_handler(request: Request, exc: AttendanceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message).model_dump(),
        headers=headers,
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Field Attendance API",
        description=(
            "Records employee check-ins at client sites, measuring the "
            "distance from each site, and gives managers a daily "
            "summary of their team's visits and working hours."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_exception_handler(AttendanceError, attendance_error_handler)

    # Routers
    app.include_router(checkins.router, prefix="/api/v1")
    app.include_router(reports.router, prefix="/api/v1")
    app.include_router(health.router, prefix="/api/v1")

    return app
