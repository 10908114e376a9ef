"""
Notekeep Backend — Notes Route Handlers
=========================================

What:  CRUD endpoints under /api/notes.
How:   Checks cheap request-shape rules (presence of `content`), delegates
       to NoteRepository, and maps the outcome to a status code.
       Repository exceptions are translated centrally (see main.py).

Status mapping:
    GET    /api/notes        200
    GET    /api/notes/{id}   200 | 404 (empty body) | 400 malformatted id
    POST   /api/notes        201 | 400 content missing | 401 bad token
    PUT    /api/notes/{id}   200 | 404 | 400
    DELETE /api/notes/{id}   204 (also for unknown ids) | 400
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from notekeep.database import get_db_session
from notekeep.dependencies import get_optional_user
from notekeep.exceptions import NotFoundError, ValidationError
from notekeep.models.user import User
from notekeep.repositories.note_repository import note_repository
from notekeep.schemas.note import ErrorResponse, NoteCreate, NoteResponse, NoteUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["Notes"])

_ERRORS = {
    400: {"description": "Invalid input or malformatted id", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


@router.get("", response_model=List[NoteResponse], summary="List all notes")
async def list_notes(db: AsyncSession = Depends(get_db_session)) -> List[NoteResponse]:
    notes = await note_repository.find_all(db)
    return [NoteResponse.from_model(note) for note in notes]


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_ERRORS, 404: {"description": "Note not found (empty body)"}},
    summary="Get a single note by id",
)
async def get_note(note_id: str, db: AsyncSession = Depends(get_db_session)):
    """
    A malformed id raises MalformedIdentifierError (400); a well-formed id
    with no record answers 404 with no body.
    """
    note = await note_repository.find_by_id(db, note_id)
    if note is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return NoteResponse.from_model(note)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_ERRORS, 401: {"description": "Bearer token invalid", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    user: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Create a note. When a valid bearer token is sent the note is linked to
    its user.

    Body: {"content": str, "important"?: bool}
    """
    if payload.content is None:
        raise ValidationError("content missing", field="content")

    note = await note_repository.create(
        db,
        content=payload.content,
        important=payload.important or False,
        user=user,
    )
    return NoteResponse.from_model(note)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_ERRORS, 404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Replace a note's content and importance",
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Full replace of `content` and `important`.

    An id that is well-formed but unknown answers 404 {"error": "note not found"}.
    """
    if payload.content is None:
        raise ValidationError("content missing", field="content")

    note = await note_repository.update_by_id(
        db,
        note_id,
        content=payload.content,
        important=payload.important,
    )
    if note is None:
        raise NotFoundError(resource="note", resource_id=note_id)
    return NoteResponse.from_model(note)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERRORS,
    summary="Delete a note (idempotent)",
)
async def delete_note(note_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await note_repository.delete_by_id(db, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
