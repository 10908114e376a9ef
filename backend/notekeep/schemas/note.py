"""
Notekeep Backend — Note Request/Response Schemas
==================================================

What:  Pydantic models defining the note API contract.
How:   FastAPI validates request bodies against these and serializes
       responses through them.

Request fields are Optional on purpose: a missing `content` is reported by
the route as {"error": "content missing"} (400) rather than by FastAPI's
generic body validation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from notekeep.models.note import Note


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /api/notes."""
    content: Optional[str] = Field(default=None, description="Note text (required)")
    important: Optional[bool] = Field(default=None, description="Defaults to false")


class NoteUpdate(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    The update is a full replace: an omitted `important` resets the flag to false.
    """
    content: Optional[str] = Field(default=None, description="New note text (required)")
    important: Optional[bool] = Field(default=None, description="New importance flag")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """JSON representation of a stored note."""
    id: str = Field(description="24-character hex identifier")
    content: str = Field(description="Note text")
    important: bool = Field(description="Importance flag")
    user: Optional[str] = Field(default=None, description="Id of the creating user, if any")

    @classmethod
    def from_model(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            content=note.content,
            important=note.important,
            user=note.user_id,
        )


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {"error": "malformatted id"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
