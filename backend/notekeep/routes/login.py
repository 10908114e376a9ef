"""
Notekeep Backend — Login Route
================================

What:  POST /api/login exchanges a username and password for a bearer token.
How:   Unknown username and wrong password produce the same 401 response.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from notekeep.database import get_db_session
from notekeep.exceptions import AuthenticationError
from notekeep.repositories.user_repository import user_repository
from notekeep.schemas.note import ErrorResponse
from notekeep.schemas.user import LoginRequest, LoginResponse
from notekeep.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/login", tags=["Auth"])


@router.post(
    "",
    response_model=LoginResponse,
    responses={401: {"description": "Invalid credentials", "model": ErrorResponse}},
    summary="Log in and receive a bearer token",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    user = await user_repository.find_by_username(db, payload.username)
    password_ok = user is not None and auth_service.verify_password(
        payload.password, user.password_hash
    )
    if not password_ok:
        logger.info("Failed login for username %r", payload.username)
        raise AuthenticationError("invalid username or password")

    token = auth_service.issue_token(user)
    logger.info("User %s logged in", user.id)
    return LoginResponse(token=token, username=user.username, name=user.name)
