"""
BlogAPI Backend: Post SQLAlchemy Model
=======================================

What:  ORM model representing the `posts` collection.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by PostStore for CRUD operations and by the post mapper for shaping.

Document Design:
    - UUID primary key assigned on insert, never changed afterwards
    - author: a JSON sub-document {"firstName": ..., "lastName": ...};
      the combined display name is derived by the mapper, never stored
    - created: UTC with timezone, set once on insert

    Index on created: the list operation orders by it.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Index, Text, Uuid, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from blogapi.database import Base


def parse_post_id(post_id: Any) -> Optional[uuid.UUID]:
    """Post ids are UUIDs in any spelling uuid.UUID accepts; anything else is None."""
    try:
        return uuid.UUID(str(post_id))
    except ValueError:
        return None


class Post(Base):
    """
    A blog post document.

    Lifecycle:
        1. Inserted by POST /posts (id and created assigned here)
        2. Updated in place by PUT /posts/{id}, only the supplied fields change
        3. Removed permanently by DELETE /posts/{id}

    Invariant: a stored post always has title, content and an author with
    both firstName and lastName.
    """

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Store-assigned identifier, immutable after creation",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post title, never empty",
    )

    # May be an empty string, never NULL
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Post body",
    )

    # JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
    author: Mapped[Dict[str, str]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        comment="Author sub-document with firstName and lastName",
    )

    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this post was created (UTC)",
    )

    __table_args__ = (
        Index("idx_posts_created", "created"),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Post(id={self.id}, title='{self.title}', created='{self.created}')>"
