"""Create posts table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `posts` table holding blog post documents.
How:   Portable column types (Uuid, JSON, DateTime with time zone) so the
       same migration runs on PostgreSQL and SQLite; the author column is
       JSONB on PostgreSQL.

Rollback: downgrade() drops the table entirely (destructive, all posts lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the posts table and its created index. See blogapi/models/post.py."""
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Store-assigned identifier, immutable after creation",
        ),
        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Post title, never empty",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Post body",
        ),
        sa.Column(
            "author",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
            comment="Author sub-document with firstName and lastName",
        ),
        sa.Column(
            "created",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this post was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_posts_created", "posts", ["created"])


def downgrade() -> None:
    """Drop the posts table. WARNING: destructive."""
    op.drop_index("idx_posts_created", table_name="posts")
    op.drop_table("posts")
