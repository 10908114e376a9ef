"""
Test data and database inspection helpers shared by the API tests.
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from notekeep.database import async_session_factory
from notekeep.models.note import Note
from notekeep.models.user import User
from notekeep.schemas.note import NoteResponse
from notekeep.schemas.user import UserResponse

INITIAL_NOTES: List[Dict[str, Any]] = [
    {"content": "HTML is easy", "important": True},
    {"content": "Browser can execute only JavaScript", "important": False},
    {"content": "GET and POST are the most important methods of HTTP protocol", "important": True},
]


async def notes_in_db() -> List[Dict[str, Any]]:
    """Every stored note, serialized exactly as the API returns it."""
    async with async_session_factory() as session:
        result = await session.execute(select(Note).order_by(Note.created_at, Note.id))
        return [NoteResponse.from_model(note).model_dump() for note in result.scalars()]


async def users_in_db() -> List[Dict[str, Any]]:
    async with async_session_factory() as session:
        result = await session.execute(
            select(User).options(selectinload(User.notes)).order_by(User.created_at, User.id)
        )
        return [UserResponse.from_model(user).model_dump() for user in result.scalars()]


async def non_existing_id() -> str:
    """A well-formed id that belonged to a note which has since been deleted."""
    async with async_session_factory() as session:
        note = Note(content="willremovethissoon")
        session.add(note)
        await session.commit()
        await session.delete(note)
        await session.commit()
        return note.id
