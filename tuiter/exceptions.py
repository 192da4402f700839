"""
Tuiter Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios of the service.
Why:   Each exception maps to one HTTP status code in the global handlers
       registered by main.py, so route handlers never build error bodies.
How:   Each exception carries a message and an optional context dict.
Who:   Raised by DAOs; caught by the handlers in main.py.

Exception Hierarchy:
    TuiterError (base)
    ├── ValidationError   → 400 Bad Request (document violates its schema)
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class TuiterError(Exception):
    """
    Base exception for all Tuiter application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, and for validation errors returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(TuiterError):
    """
    Raised when a document fails its schema before it is written.

    When:    A tuit without text, a user without a username, a field of the
             wrong type.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "tuit document failed schema validation",
            "details": {"resource": "tuit", "fields": ["tuit"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(TuiterError):
    """
    Raised when a MongoDB operation fails.

    When:    Server unreachable, write rejected, duplicate key, timeout.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the driver error
    is kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
