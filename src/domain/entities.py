"""Report value objects shared by the repository and API layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EmployeeDailyStats:
    """One employee's activity for a single day."""

    employee_id: int
    employee_name: str
    checkins: int = 0
    clients_visited: int = 0
    working_hours: Optional[float] = None


@dataclass(frozen=True)
class TeamSummary:
    total_employees: int
    total_checkins: int
    total_working_hours: float
    unique_clients_visited: int
