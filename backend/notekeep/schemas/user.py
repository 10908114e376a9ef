"""
Notekeep Backend — User and Login Schemas
===========================================

What:  Pydantic models for POST /api/users, GET /api/users and POST /api/login.
Security: No response model has a password or password hash field.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from notekeep.models.user import User


class UserCreate(BaseModel):
    """Body of POST /api/users. Length limits match the users table columns."""
    username: Optional[str] = Field(
        default=None, max_length=64, description="Unique login name (required)"
    )
    name: Optional[str] = Field(default=None, max_length=255, description="Display name")
    password: Optional[str] = Field(default=None, description="Plaintext password (required)")


class UserResponse(BaseModel):
    """Public representation of a user."""
    id: str
    username: str
    name: Optional[str] = None
    notes: List[str] = Field(default_factory=list, description="Ids of notes created by the user")

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        """Requires `user.notes` to be loaded (see UserRepository)."""
        return cls(
            id=user.id,
            username=user.username,
            name=user.name,
            notes=[note.id for note in user.notes],
        )


class LoginRequest(BaseModel):
    """Body of POST /api/login."""
    username: str = Field(default="")
    password: str = Field(default="")


class LoginResponse(BaseModel):
    """Successful login: a bearer token plus who it was issued to."""
    token: str
    username: str
    name: Optional[str] = None
