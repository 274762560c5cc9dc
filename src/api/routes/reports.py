"""
Report endpoints
================

GET /api/v1/reports/daily-summary?date=YYYY-MM-DD[&employee_id=N]
    -- per-employee check-in statistics for the caller's team plus a
       team-wide summary (managers only)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.auth import require_manager
from src.api.dependencies import get_db
from src.api.middleware import limiter
from src.api.schemas import (
    DailySummaryData,
    DailySummaryResponse,
    EmployeeStatsResponse,
    ErrorResponse,
    TeamSummaryResponse,
)
from src.config import settings
from src.domain.exceptions import AttendanceError, ReportGenerationError
from src.domain.reports import build_team_summary, parse_report_date
from src.infrastructure.models import UserModel
from src.infrastructure.repositories import ReportRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get(
    "/daily-summary",
    response_model=DailySummaryResponse,
    summary="Daily check-in summary for the manager's team",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed date"},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@limiter.limit(settings.rate_limit)
async def daily_summary(
    request: Request,
    date: Optional[str] = Query(None, description="Report day, YYYY-MM-DD"),
    employee_id: Optional[int] = Query(None, description="Restrict to one employee"),
    manager: UserModel = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    day = parse_report_date(date)

    try:
        rows = await ReportRepository(db).daily_employee_stats(
            manager_id=manager.id, day=day, employee_id=employee_id
        )
        summary = build_team_summary(rows)
        response = DailySummaryResponse(
            data=DailySummaryData(
                date=date,
                team_summary=TeamSummaryResponse.model_validate(summary),
                employees=[EmployeeStatsResponse.model_validate(r) for r in rows],
            )
        )
    except AttendanceError:
        raise
    except Exception as exc:
        logger.exception("Daily summary error (manager=%s, date=%s)", manager.id, date)
        raise ReportGenerationError() from exc

    logger.info(
        "Daily summary for manager %s on %s: %d employees",
        manager.id, day, summary.total_employees,
    )
    return response
