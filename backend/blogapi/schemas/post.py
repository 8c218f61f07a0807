"""
BlogAPI Backend: Pydantic Request/Response Schemas
===================================================

What:  Pydantic models defining the API contract of the post resource.
How:   The post mapper validates raw request bodies into the write models
       below; routes serialize the read models as responses. FastAPI also
       uses them to generate the OpenAPI documentation.
Who:   Used by the post mapper, the post store and the route handlers.

Write models vs read models:
    NewPostDraft / PartialPostUpdate describe what the store accepts.
    They only come out of the mapper, so the store never sees raw JSON.
    PostResponse is the external shape: the author is a single display
    string there, while the stored document keeps firstName/lastName.
"""

import uuid
from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field, StringConstraints, field_validator

# Non-empty means at least one non-whitespace character; the value is stored as sent
NonBlankStr = Annotated[str, StringConstraints(min_length=1, pattern=r"^\s*\S")]


# ══════════════════════════════════════════════════════════════════════════
# Write Models: validated input, produced by the post mapper
# ══════════════════════════════════════════════════════════════════════════


class AuthorName(BaseModel):
    """Structured author name; both parts are required and non-empty."""
    firstName: NonBlankStr = Field(description="Author first name")
    lastName: NonBlankStr = Field(description="Author last name")

    model_config = {"extra": "ignore", "frozen": True}


class NewPostDraft(BaseModel):
    """
    What:  A validated, not-yet-persisted post.
    Who:   Produced by post_mapper.from_create_request, consumed by PostStore.insert.

    Unknown keys (including `id` and `created`) are dropped; the store
    assigns both on insert.
    """
    title: NonBlankStr = Field(description="Post title")
    content: str = Field(description="Post body, may be empty")
    author: AuthorName = Field(description="Structured author name")

    model_config = {"extra": "ignore", "frozen": True}


class PartialPostUpdate(BaseModel):
    """
    What:  The subset of post fields supplied by an update request.
    Who:   Produced by post_mapper.from_update_request, consumed by PostStore.update_by_id.

    Presence is tracked by Pydantic's `model_fields_set`: a field the client
    did not send is absent, never None. An explicit null is rejected, so
    "unset" and "cleared" cannot be confused.
    """
    title: Optional[NonBlankStr] = Field(default=None)
    content: Optional[str] = Field(default=None)
    author: Optional[AuthorName] = Field(default=None)

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("title", "content", "author", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("must not be null")
        return v

    def changes(self) -> Dict[str, Any]:
        """Supplied fields only, as plain values ready to store."""
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """
    What:  External representation of a post.
    Who:   Returned by GET /posts/{id} and POST /posts, and as items of GET /posts.

    The key set is exactly {id, title, content, author, created}.
    """
    id: uuid.UUID = Field(description="Unique post identifier (UUID)")
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")
    author: str = Field(description="Author display name: '<firstName> <lastName>'")
    created: datetime = Field(description="When the post was created (UTC ISO 8601)")


class PostListResponse(BaseModel):
    """Wrapper for GET /posts. No pagination: every stored post is returned."""
    posts: List[PostResponse] = Field(description="All stored posts")


# ══════════════════════════════════════════════════════════════════════════
# Error and Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Field 'title' must not be empty",
            "details": {"field": "title", "kind": "invalid_field"},
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response: service status and database connectivity."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
