"""
Notekeep Backend — Note Repository
====================================

What:  CRUD operations on notes against the async SQLAlchemy session.
Who:   Called by the /api/notes route handlers.

Writes are committed before the method returns, so a route only answers
2xx for a change that is already durable.

Outcome contract:
    find_by_id / update_by_id   → Note, or None when the id has no record
    delete_by_id                → None whether or not a record existed
    malformed id (any method)   → MalformedIdentifierError
    missing/empty content       → ValidationError
    unexpected SQLAlchemy error → DatabaseError
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notekeep.exceptions import DatabaseError, ValidationError
from notekeep.identifiers import parse_id
from notekeep.models.note import Note
from notekeep.models.user import User

logger = logging.getLogger(__name__)


def _require_content(content: Optional[str]) -> str:
    if content is None or not content.strip():
        raise ValidationError.required("Note", "content")
    return content


class NoteRepository:
    """
    Stateless repository for Note records.

    Database errors are wrapped in DatabaseError with the original exception
    type kept in the context for the server log.
    """

    async def find_all(self, db: AsyncSession) -> List[Note]:
        """Returns every note, oldest first."""
        try:
            result = await db.execute(select(Note).order_by(Note.created_at, Note.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def find_by_id(self, db: AsyncSession, note_id: str) -> Optional[Note]:
        """
        Retrieve a single note.

        Returns:
            The Note, or None if no note has this id.

        Raises:
            MalformedIdentifierError: note_id is not a 24-character hex string
            DatabaseError: query execution failed
        """
        key = parse_id(note_id)
        try:
            return await db.get(Note, key)
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", key, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": key, "error_type": type(e).__name__},
            )

    async def create(
        self,
        db: AsyncSession,
        content: Optional[str],
        important: Optional[bool] = False,
        user: Optional[User] = None,
    ) -> Note:
        """
        Persist a new note.

        Args:
            db: Async database session
            content: Note text; None, empty and whitespace-only are rejected
            important: Importance flag; None is stored as False
            user: Creator, when the request carried a valid bearer token

        Raises:
            ValidationError: content missing or empty (nothing is written)
            DatabaseError: insert failed
        """
        note = Note(
            content=_require_content(content),
            important=bool(important),
            user_id=user.id if user is not None else None,
        )
        try:
            db.add(note)
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the note. Please try again.",
                context={"error_type": type(e).__name__},
            )
        logger.info("Note created: %s (user=%s)", note.id, note.user_id)
        return note

    async def update_by_id(
        self,
        db: AsyncSession,
        note_id: str,
        content: Optional[str],
        important: Optional[bool],
    ) -> Optional[Note]:
        """
        Replace a note's content and importance.

        Returns:
            The updated Note, or None if no note has this id.

        Raises:
            MalformedIdentifierError: note_id is malformed
            ValidationError: content missing or empty
        """
        key = parse_id(note_id)
        new_content = _require_content(content)
        note = await self.find_by_id(db, key)
        if note is None:
            return None

        note.content = new_content
        note.important = bool(important)
        try:
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", key, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": key, "error_type": type(e).__name__},
            )
        logger.info("Note updated: %s", key)
        return note

    async def delete_by_id(self, db: AsyncSession, note_id: str) -> None:
        """
        Delete a note if it exists. Deleting an unknown id is not an error.

        Raises:
            MalformedIdentifierError: note_id is malformed
        """
        key = parse_id(note_id)
        try:
            result = await db.execute(delete(Note).where(Note.id == key))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", key, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": key, "error_type": type(e).__name__},
            )
        logger.info("Note delete %s: %d row(s) removed", key, result.rowcount)


# ── Singleton Instance ────────────────────────────────────────────────────
note_repository = NoteRepository()
