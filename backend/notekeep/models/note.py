"""
Notekeep Backend — Note SQLAlchemy Model
==========================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteRepository for CRUD operations and by Alembic for schema management.

Table Design:
    - id: 24-char hex string assigned in Python (see notekeep.identifiers)
    - content: required, non-empty text
    - important: defaults to false
    - user_id: creator when the note was posted with a bearer token, else NULL
    - created_at: UTC with timezone; gives find_all a stable order
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Index, String, Text, false, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import TIMESTAMP

from notekeep.database import Base
from notekeep.identifiers import ID_LENGTH, new_id

if TYPE_CHECKING:
    from notekeep.models.user import User


class Note(Base):
    """
    A single note.

    Lifecycle:
        1. Created by POST /api/notes (id assigned here, never changes)
        2. Replaced in full by PUT /api/notes/{id} (content + important)
        3. Deleted by DELETE /api/notes/{id}
    """

    __tablename__ = "notes"

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        primary_key=True,
        default=new_id,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    important: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    user_id: Mapped[Optional[str]] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    user: Mapped[Optional["User"]] = relationship(back_populates="notes")

    __table_args__ = (
        Index("idx_notes_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, important={self.important})>"
