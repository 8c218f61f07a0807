"""
BlogAPI Backend: Post Mapper
=============================

What:  Pure conversions between stored posts, request bodies and responses.
How:   Request bodies are validated with the Pydantic write models; the first
       Pydantic error is translated into the application's ValidationError
       with a dotted field path (e.g. "author.firstName").
Who:   Called by the post route handlers before and after every store call.

No function here touches the database or the request; they can be tested
with plain dicts and Post instances.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from blogapi.exceptions import ValidationError
from blogapi.models.post import Post, parse_post_id
from blogapi.schemas.post import NewPostDraft, PartialPostUpdate, PostResponse


def author_display_name(author: Dict[str, str]) -> str:
    """Joins the author sub-document into '<firstName> <lastName>'."""
    return f"{author['firstName']} {author['lastName']}"


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; every stored timestamp is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_external(post: Post) -> PostResponse:
    """Shape a stored post into the response representation."""
    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        author=author_display_name(post.author),
        created=_as_utc(post.created),
    )


def _translate(exc: PydanticValidationError) -> ValidationError:
    """Turn the first Pydantic error into a ValidationError naming the field."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "body"

    if error["type"] == "missing":
        return ValidationError(
            message=f"Field '{field}' is required",
            field=field,
            kind=ValidationError.MISSING_FIELD,
        )
    if error["type"] in ("string_too_short", "string_pattern_mismatch"):
        return ValidationError(
            message=f"Field '{field}' must not be empty",
            field=field,
            kind=ValidationError.INVALID_FIELD,
        )
    return ValidationError(
        message=f"Field '{field}' is invalid: {error['msg']}",
        field=field,
        kind=ValidationError.INVALID_FIELD,
    )


def _require_object(body: Any) -> Dict[str, Any]:
    if not isinstance(body, dict):
        raise ValidationError(
            message="Request body must be a JSON object",
            field="body",
            kind=ValidationError.INVALID_BODY,
        )
    return body


def from_create_request(body: Any) -> NewPostDraft:
    """
    Validate a create body into a NewPostDraft.

    Requires title (non-empty), content (present, may be empty) and an
    author object with non-empty firstName and lastName.

    Raises:
        ValidationError: naming the first missing or malformed field
    """
    body = _require_object(body)
    try:
        return NewPostDraft.model_validate(body)
    except PydanticValidationError as e:
        raise _translate(e) from e


def _same_id(body_id: Any, path_id: str) -> bool:
    # UUIDs compare by value, so case and hyphenation do not matter
    body_pk, path_pk = parse_post_id(body_id), parse_post_id(path_id)
    if body_pk is None or path_pk is None:
        return str(body_id) == path_id
    return body_pk == path_pk


def from_update_request(body: Any, path_id: str) -> PartialPostUpdate:
    """
    Validate an update body into a PartialPostUpdate.

    An `id` in the body must match the id in the path. Any subset of title,
    content and author may be supplied; whatever is supplied is validated
    with the same rules as on create. `created` is immutable and ignored.

    Raises:
        ValidationError: id mismatch, or the first malformed supplied field
    """
    body = _require_object(body)

    body_id: Optional[Any] = body.get("id")
    if "id" in body and not _same_id(body_id, path_id):
        raise ValidationError(
            message=f"Request path id ({path_id}) and request body id ({body_id}) must match",
            field="id",
            kind=ValidationError.ID_MISMATCH,
        )

    fields = {k: v for k, v in body.items() if k not in ("id", "created")}
    try:
        return PartialPostUpdate.model_validate(fields)
    except PydanticValidationError as e:
        raise _translate(e) from e
