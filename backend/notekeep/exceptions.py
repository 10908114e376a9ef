"""
Notekeep Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for every failure a request can hit.
How:   Each exception carries a message, an optional context dict and an
       explicit `kind` tag. The global handler registered in main.py looks
       up the HTTP status for the tag and returns `{"error": message}`.
Who:   Raised by repositories, the auth service and route handlers.

Exception Hierarchy:
    NotekeepError (base)               kind                   HTTP
    ├── ValidationError                VALIDATION             400
    ├── MalformedIdentifierError       MALFORMED_IDENTIFIER   400
    ├── NotFoundError                  NOT_FOUND              404
    ├── UniquenessViolationError       UNIQUE_VIOLATION       400
    ├── AuthenticationError            UNAUTHORIZED           401
    └── DatabaseError                  UNKNOWN                500
"""

import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    """Tag identifying which failure a NotekeepError represents."""

    VALIDATION = "validation"
    MALFORMED_IDENTIFIER = "malformed_identifier"
    NOT_FOUND = "not_found"
    UNIQUE_VIOLATION = "unique_violation"
    UNAUTHORIZED = "unauthorized"
    UNKNOWN = "unknown"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.MALFORMED_IDENTIFIER: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNIQUE_VIOLATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.UNKNOWN: 500,
}


class NotekeepError(Exception):
    """
    Base exception for all Notekeep application errors.

    Attributes:
        message:  User-facing error description (returned as `error` in the body)
        context:  Additional debug info (logged but NOT returned to client)
        kind:     ErrorKind tag used for status code lookup
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class ValidationError(NotekeepError):
    """
    Raised when client input fails validation.

    When:    Missing/empty required field, wrong body shape.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Note validation failed: content: Path `content` is required."}
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field

    @classmethod
    def required(cls, model: str, field: str) -> "ValidationError":
        """Builds the error raised when a required model field is missing."""
        return cls(
            message=f"{model} validation failed: {field}: Path `{field}` is required.",
            field=field,
            context={"model": model},
        )


class MalformedIdentifierError(NotekeepError):
    """
    Raised when an id does not match the store's identifier syntax.

    What:    Distinguishes "this can never be an id" (400) from
             "no record has this id" (404).
    HTTP:    400 Bad Request, body {"error": "malformatted id"}
    """

    kind = ErrorKind.MALFORMED_IDENTIFIER

    def __init__(self, value: Any = None, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["value"] = repr(value)
        super().__init__(message="malformatted id", context=ctx)
        self.value = value


class NotFoundError(NotekeepError):
    """
    Raised when a well-formed id has no matching record.

    When:    PUT /api/notes/{id} on an id that does not exist.
    HTTP:    404 Not Found
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class UniquenessViolationError(NotekeepError):
    """
    Raised when creating a record would duplicate a unique key.

    HTTP:    400 Bad Request

    Example response:
        {"error": "User validation failed: username: Error, expected `username`
                   to be unique. Value: `root`"}
    """

    kind = ErrorKind.UNIQUE_VIOLATION

    def __init__(
        self,
        model: str,
        field: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"{model} validation failed: {field}: "
            f"Error, expected `{field}` to be unique. Value: `{value}`"
        )
        ctx = context or {}
        ctx.update({"model": model, "field": field})
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(NotekeepError):
    """
    Raised when credentials or a bearer token are missing or invalid.

    HTTP:    401 Unauthorized
    """

    kind = ErrorKind.UNAUTHORIZED

    def __init__(
        self,
        message: str = "token invalid",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(NotekeepError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, unexpected constraint failure.
    HTTP:    500 Internal Server Error

    The SQLAlchemy exception type is kept in `context` for the server log.
    """

    kind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
