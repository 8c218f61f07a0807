"""
BlogAPI Backend: Post Route Handlers
=====================================

What:  The /posts resource: list, get, create, update, delete.
How:   Each handler parses the request body through the post mapper, calls
       the post store, and shapes the result back through the mapper.
Who:   Called by API clients.

Status codes:
    GET    /posts        200 {"posts": [...]}
    GET    /posts/{id}   200 post | 404
    POST   /posts        201 post | 400
    PUT    /posts/{id}   204      | 400 | 404
    DELETE /posts/{id}   204      | 404

Bodies are read as raw JSON rather than declared as Pydantic parameters, so
that malformed input is reported as a 400 ValidationError naming the field
instead of FastAPI's default 422.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.database import get_db_session
from blogapi.exceptions import ValidationError
from blogapi.schemas.post import ErrorResponse, PostListResponse, PostResponse
from blogapi.services import post_mapper
from blogapi.services.post_store import post_store

router = APIRouter(prefix="/posts", tags=["Posts"])


async def json_body(request: Request) -> Any:
    """Dependency returning the decoded JSON body, or a 400 if it is not JSON."""
    try:
        return await request.json()
    except ValueError as e:
        raise ValidationError(
            message="Request body must be valid JSON",
            field="body",
            kind=ValidationError.INVALID_BODY,
        ) from e


@router.get(
    "",
    response_model=PostListResponse,
    responses={500: {"description": "Store unavailable", "model": ErrorResponse}},
    summary="List all posts",
)
async def list_posts(db: AsyncSession = Depends(get_db_session)) -> PostListResponse:
    posts = await post_store.list_all(db)
    return PostListResponse(posts=[post_mapper.to_external(post) for post in posts])


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={404: {"description": "Post not found", "model": ErrorResponse}},
    summary="Get a single post by ID",
)
async def get_post(post_id: str, db: AsyncSession = Depends(get_db_session)) -> PostResponse:
    post = await post_store.find_by_id(db, post_id)
    return post_mapper.to_external(post)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid post body", "model": ErrorResponse}},
    summary="Create a post",
    description=(
        "Body: {\"title\": str, \"content\": str, \"author\": {\"firstName\": str, "
        "\"lastName\": str}}. Returns the stored post with its assigned id and "
        "creation time; the author is returned as a single display string."
    ),
)
async def create_post(
    body: Any = Depends(json_body),
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    draft = post_mapper.from_create_request(body)
    post = await post_store.insert(db, draft)
    return post_mapper.to_external(post)


@router.put(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Invalid body or id mismatch", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
    },
    summary="Update the supplied fields of a post",
    description=(
        "Only title, content and author present in the body are changed. An id "
        "in the body must match the path. The response has no body; fetch the "
        "post again to read the result."
    ),
)
async def update_post(
    post_id: str,
    body: Any = Depends(json_body),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    # Validate before looking the post up: a bad body is a 400 even for unknown ids
    update = post_mapper.from_update_request(body, post_id)
    await post_store.update_by_id(db, post_id, update)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Post not found", "model": ErrorResponse}},
    summary="Delete a post",
)
async def delete_post(post_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await post_store.delete_by_id(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
