"""
Notekeep Backend — User Repository
====================================

What:  Lookup and creation of users.
How:   Username uniqueness is checked with a SELECT before the INSERT; the
       unique index on users.username catches a concurrent duplicate, and
       that IntegrityError is reported the same way. A new user is committed
       before create() returns.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from notekeep.exceptions import DatabaseError, UniquenessViolationError, ValidationError
from notekeep.identifiers import parse_id
from notekeep.models.note import Note  # noqa: F401  (registers the User.notes target)
from notekeep.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Stateless repository for User records."""

    async def find_all(self, db: AsyncSession) -> List[User]:
        """Returns every user with their notes loaded."""
        try:
            result = await db.execute(
                select(User).options(selectinload(User.notes)).order_by(User.created_at, User.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve users. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def find_by_id(self, db: AsyncSession, user_id: str) -> Optional[User]:
        key = parse_id(user_id)
        try:
            result = await db.execute(
                select(User).options(selectinload(User.notes)).where(User.id == key)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching user %s: %s", key, str(e))
            raise DatabaseError(
                message="Could not retrieve the user. Please try again.",
                context={"user_id": key, "error_type": type(e).__name__},
            )

    async def find_by_username(self, db: AsyncSession, username: str) -> Optional[User]:
        try:
            result = await db.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error looking up a username: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve the user. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def create(
        self,
        db: AsyncSession,
        username: Optional[str],
        password_hash: str,
        name: Optional[str] = None,
    ) -> User:
        """
        Persist a new user.

        Args:
            db: Async database session
            username: Required, must not already exist
            password_hash: Output of auth_service.hash_password (never plaintext)
            name: Optional display name

        Raises:
            ValidationError: username missing or empty
            UniquenessViolationError: username already taken
        """
        if username is None or not username.strip():
            raise ValidationError.required("User", "username")

        if await self.find_by_username(db, username) is not None:
            raise UniquenessViolationError("User", "username", username)

        user = User(username=username, name=name, password_hash=password_hash, notes=[])
        db.add(user)
        try:
            await db.flush()
            await db.commit()
        except IntegrityError as e:
            logger.warning("Concurrent duplicate username rejected by index: %s", username)
            raise UniquenessViolationError("User", "username", username) from e
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the user. Please try again.",
                context={"error_type": type(e).__name__},
            )
        logger.info("User created: %s (%s)", user.id, user.username)
        return user


# ── Singleton Instance ────────────────────────────────────────────────────
user_repository = UserRepository()
