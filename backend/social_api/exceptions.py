"""
Social Media API Backend: Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for each failure the API reports.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by route handlers and services; caught by global handlers.

Exception Hierarchy:
    SocialMediaError (base)     → 500 Internal Server Error
    ├── ValidationError         → 400 Bad Request (bad input shape or length)
    ├── ConflictError           → 409 Conflict (username already taken)
    ├── AuthenticationError     → 401 Unauthorized (bad credentials)
    └── DatabaseError           → 500 Internal Server Error

Missing messages are not an error: GET and DELETE on an unknown message id
answer 200 with an empty body, so there is no NotFoundError.
"""

from typing import Any, Dict, Optional


class SocialMediaError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SocialMediaError):
    """
    Raised when client input fails a business rule.

    When:    Blank username, short password, blank or oversized message text,
             unknown postedBy account, update of an unknown message, or a
             request body that cannot be decoded.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Message text must be 1-255 characters",
            "details": {"field": "messageText"}
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


class ConflictError(SocialMediaError):
    """
    Raised when registration targets a username that already exists.

    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "Username is already taken",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthenticationError(SocialMediaError):
    """
    Raised when login credentials do not match a stored account.

    HTTP:    401 Unauthorized

    The message is identical for "unknown username" and "wrong password" so
    the response does not reveal which usernames exist.
    """

    def __init__(
        self,
        message: str = "Invalid username or password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(SocialMediaError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, driver errors.
    HTTP:    500 Internal Server Error

    The client always receives a generic message; SQL and constraint details
    stay in the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
