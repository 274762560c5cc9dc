"""
Bearer-token authentication and role checks.

Tokens are opaque random strings handed out once (see ``seed.py``);
only their SHA-256 digest is stored on ``users.api_token_hash``.

* ``authenticate_token`` -- resolves the caller or raises 401
* ``require_manager``    -- additionally requires a manager role (403)
"""

from __future__ import annotations

import hashlib
import secrets
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.domain.enums import MANAGER_ROLES, UserRole
from src.domain.exceptions import AuthenticationRequired, InvalidToken, PermissionDenied
from src.infrastructure.models import UserModel
from src.infrastructure.repositories import UserRepository

_bearer = HTTPBearer(auto_error=False)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_token() -> str:
    return secrets.token_urlsafe(32)


async def authenticate_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    db: AsyncSession = Depends(get_db),
) -> UserModel:
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequired()

    user = await UserRepository(db).get_by_token_hash(hash_token(credentials.credentials))
    if user is None or not user.is_active:
        raise InvalidToken()
    return user


async def require_manager(
    user: UserModel = Depends(authenticate_token),
) -> UserModel:
    if UserRole(user.role) not in MANAGER_ROLES:
        raise PermissionDenied()
    return user
