"""
Notekeep Backend — User SQLAlchemy Model
==========================================

What:  ORM model representing the `users` table.
How:   `username` carries a unique index so a duplicate that slips past the
       repository's pre-insert check still fails at the database.
       Only the PBKDF2 hash of the password is stored (see auth_service).
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import TIMESTAMP

from notekeep.database import Base
from notekeep.identifiers import ID_LENGTH, new_id

if TYPE_CHECKING:
    from notekeep.models.note import Note


class User(Base):
    """A registered user who can log in and create notes."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        primary_key=True,
        default=new_id,
    )

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
    )

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    notes: Mapped[List["Note"]] = relationship(back_populates="user")

    def __repr__(self) -> str:
        # Never include password_hash
        return f"<User(id={self.id}, username='{self.username}')>"
