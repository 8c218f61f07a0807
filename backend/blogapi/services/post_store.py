"""
BlogAPI Backend: Post Store
============================

What:  Persistence operations for posts, one method per verb.
How:   Async SQLAlchemy against the `posts` table. Every method takes the
       request's AsyncSession; the session dependency owns commit/rollback.
Who:   Called by the post route handlers and by tests.

Error Handling:
    Missing documents raise NotFoundError. Any SQLAlchemy failure is
    logged and wrapped in StoreUnavailableError, which hides the driver
    error from clients. Nothing is retried here.

Each method issues single-document statements only; two concurrent updates
of the same post are last-write-wins for the fields each one supplies.
"""

import logging
from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.exceptions import NotFoundError, StoreUnavailableError
from blogapi.models.post import Post, parse_post_id
from blogapi.schemas.post import NewPostDraft, PartialPostUpdate

logger = logging.getLogger(__name__)


class PostStore:
    """
    Stateless data access for Post documents.

    Responsibilities:
        - list_all / count: read the whole collection
        - find_by_id: single lookup with not-found handling
        - insert / update_by_id / delete_by_id: single-document writes
        - reset: explicit drop-all, used between independent test runs
    """

    async def list_all(self, db: AsyncSession) -> List[Post]:
        """
        Every stored post, oldest first.

        Ordering by (created, id) keeps the result stable for a given
        snapshot of data; clients must not rely on it.
        """
        try:
            result = await db.execute(select(Post).order_by(Post.created, Post.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Store error listing posts: %s", str(e), exc_info=True)
            raise StoreUnavailableError(context={"operation": "list_all", "error_type": type(e).__name__})

    async def count(self, db: AsyncSession) -> int:
        try:
            result = await db.execute(select(func.count()).select_from(Post))
            return result.scalar_one()
        except SQLAlchemyError as e:
            logger.error("Store error counting posts: %s", str(e))
            raise StoreUnavailableError(context={"operation": "count", "error_type": type(e).__name__})

    async def find_by_id(self, db: AsyncSession, post_id: str) -> Post:
        """
        Fetch a single post.

        Raises:
            NotFoundError: no post with that id (including ids that are not UUIDs)
            StoreUnavailableError: query execution failed
        """
        pk = parse_post_id(post_id)
        if pk is None:
            raise NotFoundError(resource="post", resource_id=str(post_id))

        try:
            post = await db.get(Post, pk)
        except SQLAlchemyError as e:
            logger.error("Store error fetching post %s: %s", post_id, str(e))
            raise StoreUnavailableError(context={"operation": "find_by_id", "post_id": str(post_id)})

        if post is None:
            raise NotFoundError(resource="post", resource_id=str(post_id))
        return post

    async def insert(self, db: AsyncSession, draft: NewPostDraft) -> Post:
        """
        Persist a new post. The id and created timestamp are assigned by
        the model defaults during flush.
        """
        post = Post(
            title=draft.title,
            content=draft.content,
            author=draft.author.model_dump(),
        )
        try:
            db.add(post)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Store error inserting post: %s", str(e), exc_info=True)
            raise StoreUnavailableError(context={"operation": "insert", "error_type": type(e).__name__})

        logger.info("Post created: %s", post.id)
        return post

    async def update_by_id(
        self, db: AsyncSession, post_id: str, update: PartialPostUpdate
    ) -> Post:
        """
        Apply the supplied fields of `update` to an existing post.

        Fields absent from `update` keep their stored values; id and
        created are never touched.

        Raises:
            NotFoundError: no post with that id
            StoreUnavailableError: query execution failed
        """
        post = await self.find_by_id(db, post_id)
        changes = update.changes()

        for field, value in changes.items():
            setattr(post, field, value)

        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Store error updating post %s: %s", post_id, str(e), exc_info=True)
            raise StoreUnavailableError(context={"operation": "update_by_id", "post_id": str(post_id)})

        logger.info("Post %s updated: %s", post.id, sorted(changes))
        return post

    async def delete_by_id(self, db: AsyncSession, post_id: str) -> None:
        """
        Permanently remove a post.

        Raises:
            NotFoundError: no post with that id
            StoreUnavailableError: query execution failed
        """
        pk = parse_post_id(post_id)
        if pk is None:
            raise NotFoundError(resource="post", resource_id=str(post_id))

        try:
            result = await db.execute(delete(Post).where(Post.id == pk))
        except SQLAlchemyError as e:
            logger.error("Store error deleting post %s: %s", post_id, str(e), exc_info=True)
            raise StoreUnavailableError(context={"operation": "delete_by_id", "post_id": str(post_id)})

        if result.rowcount == 0:
            raise NotFoundError(resource="post", resource_id=str(post_id))
        logger.info("Post deleted: %s", pk)

    async def reset(self, db: AsyncSession) -> int:
        """
        Remove every post and return how many were removed.

        Never called by the HTTP layer; callers invoke it explicitly between
        independent runs against the same database.
        """
        try:
            result = await db.execute(delete(Post))
        except SQLAlchemyError as e:
            logger.error("Store error resetting posts: %s", str(e))
            raise StoreUnavailableError(context={"operation": "reset", "error_type": type(e).__name__})

        logger.warning("Post store reset: %d posts removed", result.rowcount)
        return result.rowcount


# Stateless; shared by all requests
post_store = PostStore()
