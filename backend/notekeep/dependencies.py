"""
Notekeep Backend — Route Dependencies
=======================================

What:  FastAPI dependencies shared by route modules.
"""

import logging
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from notekeep.config import settings
from notekeep.database import get_db_session
from notekeep.exceptions import AuthenticationError
from notekeep.identifiers import is_valid_id
from notekeep.models.user import User
from notekeep.repositories.user_repository import user_repository
from notekeep.services.auth_service import auth_service

logger = logging.getLogger(__name__)


async def get_optional_user(
    authorization: Optional[str] = Header(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Optional[User]:
    """
    Resolve the user behind an `Authorization: Bearer <token>` header.

    Returns:
        The User, or None when no bearer token was sent and
        NOTES_REQUIRE_AUTH is off.

    Raises:
        AuthenticationError: token missing (when required), expired,
            invalid, or naming a user that no longer exists
    """
    token = auth_service.extract_bearer(authorization)
    if token is None:
        if settings.notes_require_auth:
            raise AuthenticationError("token missing")
        return None

    payload = auth_service.decode_token(token)
    user_id = payload["id"]
    if not is_valid_id(user_id):
        raise AuthenticationError("token invalid", context={"reason": "malformed id claim"})

    user = await user_repository.find_by_id(db, user_id)
    if user is None:
        raise AuthenticationError("token invalid", context={"reason": "unknown user"})
    return user
