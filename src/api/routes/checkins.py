"""
Check-in endpoints
==================

POST  /api/v1/checkins                  -- check in at a client site (201)
GET   /api/v1/checkins/active           -- the caller's open check-in
PATCH /api/v1/checkins/{checkin_id}/checkout -- close a visit
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.auth import authenticate_token
from src.api.dependencies import get_db
from src.api.middleware import limiter
from src.api.schemas import CheckinCreateRequest, CheckinResponse
from src.config import settings
from src.domain.distance import calculate_distance_km
from src.domain.exceptions import Conflict, NotFound
from src.infrastructure.models import CheckinModel, UserModel
from src.infrastructure.repositories import CheckinRepository, ClientRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkins", tags=["checkins"])


def _to_response(checkin: CheckinModel) -> CheckinResponse:
    resp = CheckinResponse.model_validate(checkin)
    if checkin.distance_from_client_km is not None:
        resp.within_radius = (
            checkin.distance_from_client_km <= settings.checkin_radius_km
        )
    return resp


@router.post(
    "",
    status_code=201,
    response_model=CheckinResponse,
    summary="Check in at a client site",
)
@limiter.limit(settings.rate_limit)
async def create_checkin(
    request: Request,
    body: CheckinCreateRequest,
    user: UserModel = Depends(authenticate_token),
    db: AsyncSession = Depends(get_db),
):
    client = await ClientRepository(db).get_by_id(body.client_id)
    if not client:
        raise NotFound("Client not found")

    repo = CheckinRepository(db)
    if await repo.get_open_for_employee(user.id):
        raise Conflict("An active check-in already exists; check out first")

    distance = calculate_distance_km(
        client.latitude, client.longitude, body.latitude, body.longitude
    )
    checkin = await repo.create_checkin(
        employee_id=user.id,
        client_id=client.id,
        latitude=body.latitude,
        longitude=body.longitude,
        distance_from_client_km=distance,
        checkin_time=datetime.now(timezone.utc),
        notes=body.notes,
    )
    logger.info(
        "Employee %s checked in at client %s (%.2f km away)",
        user.id, client.id, distance,
    )
    return _to_response(checkin)


@router.get(
    "/active",
    response_model=CheckinResponse,
    summary="Get the caller's open check-in",
)
@limiter.limit(settings.rate_limit)
async def get_active_checkin(
    request: Request,
    user: UserModel = Depends(authenticate_token),
    db: AsyncSession = Depends(get_db),
):
    checkin = await CheckinRepository(db).get_open_for_employee(user.id)
    if not checkin:
        raise NotFound("No active check-in")
    return _to_response(checkin)


@router.patch(
    "/{checkin_id}/checkout",
    response_model=CheckinResponse,
    summary="Check out of a visit",
)
@limiter.limit(settings.rate_limit)
async def checkout(
    request: Request,
    checkin_id: int,
    user: UserModel = Depends(authenticate_token),
    db: AsyncSession = Depends(get_db),
):
    checkin = await CheckinRepository(db).get_by_id(checkin_id)
    # other employees' visits are reported as missing
    if not checkin or checkin.employee_id != user.id:
        raise NotFound("Check-in not found")
    if checkin.checkout_time is not None:
        raise Conflict("Already checked out")

    checkin.checkout_time = datetime.now(timezone.utc)
    await db.flush()
    logger.info("Employee %s checked out of check-in %s", user.id, checkin.id)
    return _to_response(checkin)
