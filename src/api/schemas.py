"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ── Requests ──────────────────────────────────────────────────────────


class CheckinCreateRequest(BaseModel):
    client_id: int
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    notes: Optional[str] = Field(None, max_length=1000)


# ── Responses ─────────────────────────────────────────────────────────


class CheckinResponse(BaseModel):
    id: int
    employee_id: int
    client_id: int
    latitude: float
    longitude: float
    distance_from_client_km: Optional[float] = None
    within_radius: Optional[bool] = None
    notes: Optional[str] = None
    checkin_time: datetime
    checkout_time: Optional[datetime] = None

    model_config = {"from_attributes": True}


class EmployeeStatsResponse(BaseModel):
    employee_id: int
    employee_name: str
    checkins: int
    clients_visited: int
    working_hours: Optional[float] = None

    model_config = {"from_attributes": True}


class TeamSummaryResponse(BaseModel):
    total_employees: int
    total_checkins: int
    total_working_hours: float
    unique_clients_visited: int

    model_config = {"from_attributes": True}


class DailySummaryData(BaseModel):
    date: str
    team_summary: TeamSummaryResponse
    employees: list[EmployeeStatsResponse] = []


class DailySummaryResponse(BaseModel):
    success: bool = True
    data: DailySummaryData


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
