"""
Notes Backend — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the note store, the HTTP API and
       the client controller.
How:   Each exception carries a user-safe message and an optional context
       dict. Global handlers in main.py turn server-side exceptions into JSON
       error responses; the client controller logs NetworkFailure.

Exception Hierarchy:
    NotesAppError (base)
    ├── NotFoundError            → 404 Not Found
    ├── StoreUnavailableError    → 500 Internal Server Error
    └── NetworkFailure           → client side only (logged, never rendered)
"""

from typing import Any, Dict, Optional


class NotesAppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(NotesAppError):
    """
    Raised when a note id does not match any record.

    SQLAlchemy returns None for missing rows; the service layer converts
    that into this exception so routes can answer 404 without checking.
    Malformed ids are reported the same way.
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
        self.resource_id = resource_id


class StoreUnavailableError(NotesAppError):
    """
    Raised when the note store cannot be reached or a statement fails.

    The message sent to clients stays generic; driver errors, statement
    text and connection details are only written to the server log.
    Never retried automatically.
    """

    def __init__(
        self,
        message: str = "The note store is unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NetworkFailure(NotesAppError):
    """
    Raised by the client controller when a request did not complete.

    Covers transport errors (connection refused, response lost) and
    non-success HTTP statuses. The controller logs it and keeps its state.
    """

    def __init__(
        self,
        message: str = "Request to the notes API failed",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
