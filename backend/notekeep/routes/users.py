"""
Notekeep Backend — Users Route Handlers
=========================================

What:  POST /api/users (register) and GET /api/users (list).
Security: The password is hashed before it reaches the repository; neither
          the password nor its hash appears in any response or log line.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from notekeep.database import get_db_session
from notekeep.exceptions import ValidationError
from notekeep.repositories.user_repository import user_repository
from notekeep.schemas.note import ErrorResponse
from notekeep.schemas.user import UserCreate, UserResponse
from notekeep.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing field or username taken", "model": ErrorResponse}},
    summary="Register a user",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    """
    Body: {"username": str, "name"?: str, "password": str}

    A duplicate username answers 400 with
    "... expected `username` to be unique. Value: `<username>`".
    """
    if not payload.password:
        raise ValidationError("password missing", field="password")

    user = await user_repository.create(
        db,
        username=payload.username,
        password_hash=auth_service.hash_password(payload.password),
        name=payload.name,
    )
    return UserResponse.from_model(user)


@router.get("", response_model=List[UserResponse], summary="List users")
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    users = await user_repository.find_all(db)
    return [UserResponse.from_model(user) for user in users]
