"""
Schedule API — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the error scenarios of both handlers.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the request-body boundary and the services; caught by global handlers.

Exception Hierarchy:
    ScheduleApiError (base)       → 500 Internal Server Error
    ├── ValidationError           → 400 Bad Request (malformed path or body input)
    ├── NotFoundError             → 404 Not Found
    └── DatabaseError             → 500 Internal Server Error
        ├── QueryError            → 500 (store read failed)
        └── InsertError           → 500 (constraint violation or store write failed)
"""

from typing import Any, Dict, Optional


class ScheduleApiError(Exception):
    """
    Base exception for all Schedule API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only selected keys are returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ScheduleApiError):
    """
    Raised when client input cannot be decoded into the request model.

    When:    Missing required fields, non-integer identifiers, body that is
             not a JSON object or form.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid request body",
            "details": {"field": "course_id", "errors": [...]}
        }
    """

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


class NotFoundError(ScheduleApiError):
    """
    Raised when a targeted read or delete matches no record.

    When:    GET /feedback/{id} for an unknown id, POST /schedule/remove
             for an entry that is not on the schedule.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ScheduleApiError):
    """
    Raised when the store fails to execute a statement.

    HTTP:    500 Internal Server Error

    The SQL text and driver message are logged server-side only; the
    response carries the store exception type so clients can tell
    failures apart.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class QueryError(DatabaseError):
    """A read statement (SELECT) failed in the store."""

    def __init__(
        self,
        message: str = "Could not read from the database.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InsertError(DatabaseError):
    """
    A write statement failed in the store.

    Covers constraint violations on INSERT as well as any other write
    (including the DELETE behind schedule removal).
    """

    def __init__(
        self,
        message: str = "Could not write to the database.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
