"""
BlogAPI Backend: Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the error scenarios of the post API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the post mapper and post store; caught by global handlers.

Exception Hierarchy:
    BlogAPIError (base)
    ├── ValidationError        → 400 Bad Request (client can fix)
    ├── NotFoundError          → 404 Not Found
    └── StoreUnavailableError  → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class BlogAPIError(Exception):
    """
    Base exception for all BlogAPI application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, only partly returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BlogAPIError):
    """
    Raised when a request body fails validation.

    When:    Missing or empty required field, malformed author, body that is
             not a JSON object, or an `id` in an update body that differs
             from the id in the path.
    HTTP:    400 Bad Request

    Kinds:
        missing_field:  a required field is absent
        invalid_field:  a field is present but empty or of the wrong type
        id_mismatch:    body `id` differs from the path id
        invalid_body:   the body is not a JSON object

    Example response:
        {
            "error": "validation_error",
            "message": "Field 'author.firstName' is required",
            "details": {"field": "author.firstName", "kind": "missing_field"}
        }
    """

    MISSING_FIELD = "missing_field"
    INVALID_FIELD = "invalid_field"
    ID_MISMATCH = "id_mismatch"
    INVALID_BODY = "invalid_body"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        kind: str = INVALID_FIELD,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        ctx["kind"] = kind
        super().__init__(message=message, context=ctx)
        self.field = field
        self.kind = kind
        self.reason = message


class NotFoundError(BlogAPIError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /posts/{id} with an id that is not in the store.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records; the store converts that
    into this exception so routes stay free of `if post is None` branches.
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
        self.resource = resource
        self.resource_id = resource_id


class StoreUnavailableError(BlogAPIError):
    """
    Raised when the underlying persistence layer fails.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the original
    error type is kept in `context` and logged server-side only. Nothing in
    this package retries the failed operation.
    """

    def __init__(
        self,
        message: str = "The post store is currently unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
