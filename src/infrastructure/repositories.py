"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Each repository receives an ``AsyncSession`` (unit-of-work) and exposes
domain-relevant queries only.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from sqlalchemy import and_, case, distinct, extract, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import CheckinModel, ClientModel, UserModel
from src.domain.entities import EmployeeDailyStats
from src.domain.exceptions import Conflict


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[UserModel]:
        return await self.session.get(UserModel, user_id)

    async def get_by_token_hash(self, token_hash: str) -> Optional[UserModel]:
        result = await self.session.execute(
            select(UserModel).where(UserModel.api_token_hash == token_hash)
        )
        return result.scalar_one_or_none()


class ClientRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, client_id: int) -> Optional[ClientModel]:
        return await self.session.get(ClientModel, client_id)


class CheckinRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_checkin(
        self,
        *,
        employee_id: int,
        client_id: int,
        latitude: float,
        longitude: float,
        distance_from_client_km: float,
        checkin_time: datetime,
        notes: str | None = None,
    ) -> CheckinModel:
        checkin = CheckinModel(
            employee_id=employee_id,
            client_id=client_id,
            latitude=latitude,
            longitude=longitude,
            distance_from_client_km=distance_from_client_km,
            checkin_time=checkin_time,
            notes=notes,
        )
        self.session.add(checkin)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            # lost a race against another check-in for the same employee
            raise Conflict("An active check-in already exists; check out first") from exc
        return checkin

    async def get_by_id(self, checkin_id: int) -> Optional[CheckinModel]:
        return await self.session.get(CheckinModel, checkin_id)

    async def get_open_for_employee(self, employee_id: int) -> Optional[CheckinModel]:
        result = await self.session.execute(
            select(CheckinModel)
            .where(
                CheckinModel.employee_id == employee_id,
                CheckinModel.checkout_time.is_(None),
            )
            .order_by(CheckinModel.checkin_time.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()


class ReportRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    def _hours_between(self, start, end):
        """Dialect-specific ``end - start`` in hours."""
        if self.session.get_bind().dialect.name == "sqlite":
            return (func.julianday(end) - func.julianday(start)) * 24
        return extract("epoch", end - start) / 3600

    async def daily_employee_stats(
        self,
        *,
        manager_id: int,
        day: date,
        employee_id: int | None = None,
    ) -> list[EmployeeDailyStats]:
        """
        Per-employee activity for every direct report of *manager_id*.

        Employees without check-ins on *day* are still returned (LEFT
        JOIN) with zero counts.  *day* is a UTC calendar day.
        """
        day_start = datetime.combine(day, time.min, tzinfo=timezone.utc)
        day_end = day_start + timedelta(days=1)

        worked = case(
            (
                CheckinModel.checkout_time.is_not(None),
                self._hours_between(
                    CheckinModel.checkin_time, CheckinModel.checkout_time
                ),
            ),
            else_=0,
        )
        query = (
            select(
                UserModel.id.label("employee_id"),
                UserModel.name.label("employee_name"),
                func.count(CheckinModel.id).label("checkins"),
                func.count(distinct(CheckinModel.client_id)).label("clients_visited"),
                func.sum(worked).label("working_hours"),
            )
            .select_from(UserModel)
            .outerjoin(
                CheckinModel,
                and_(
                    CheckinModel.employee_id == UserModel.id,
                    CheckinModel.checkin_time >= day_start,
                    CheckinModel.checkin_time < day_end,
                ),
            )
            .where(UserModel.manager_id == manager_id)
        )
        if employee_id is not None:
            query = query.where(UserModel.id == employee_id)
        query = query.group_by(UserModel.id, UserModel.name).order_by(UserModel.id)

        result = await self.session.execute(query)
        return [
            EmployeeDailyStats(
                employee_id=row.employee_id,
                employee_name=row.employee_name,
                checkins=row.checkins,
                clients_visited=row.clients_visited,
                working_hours=(
                    round(float(row.working_hours), 2)
                    if row.working_hours is not None
                    else None
                ),
            )
            for row in result
        ]
