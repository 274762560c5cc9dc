"""
Daily summary aggregation
=========================

Pure functions over the per-employee rows returned by
``ReportRepository.daily_employee_stats``.

Team summary
------------
* ``total_employees``        -- number of rows
* ``total_checkins``         -- sum of per-employee check-ins
* ``total_working_hours``    -- sum of working hours, ``None`` counted as 0
* ``unique_clients_visited`` -- number of distinct employees who visited
  at least one client that day

Complexity: O(n) in the number of employees.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Iterable, Optional

from .entities import EmployeeDailyStats, TeamSummary
from .exceptions import InvalidRequest

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_report_date(value: Optional[str]) -> date:
    """Validate a ``YYYY-MM-DD`` query value and return it as a ``date``."""
    if not value:
        raise InvalidRequest("date query parameter is required (YYYY-MM-DD)")
    if not _DATE_RE.match(value):
        raise InvalidRequest("Invalid date format. Use YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError:
        # well-formed but not a calendar date, e.g. 2024-02-30
        raise InvalidRequest("Invalid date format. Use YYYY-MM-DD") from None


def build_team_summary(rows: Iterable[EmployeeDailyStats]) -> TeamSummary:
    rows = list(rows)
    visitors = {r.employee_id for r in rows if r.clients_visited > 0}
    return TeamSummary(
        total_employees=len(rows),
        total_checkins=sum(r.checkins for r in rows),
        total_working_hours=round(sum(r.working_hours or 0 for r in rows), 2),
        unique_clients_visited=len(visitors),
    )
