# pylint: skip-file
# ruff: noqa
"""Initial schema - users, galleries, collections, artworks and memberships

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00

Tables created:
- users: Artist accounts with a per-user collection quota
- galleries: Top-level containers, slug unique per user
- collections: Ordered artwork groupings, slug unique per gallery
- artworks: Uploaded pieces, slug unique per user
- collection_artworks: Ordered membership (collection, artwork, position)

Status columns are stored as short strings (non-native enums):
- role: user, admin
- galleries.status / collections.status: active, archived, draft
- artworks.status: active, draft, deleted

collection_artworks has no unique index on (collection_id, position): positions
are rewritten for a whole collection in one UPDATE and must be allowed to
pass through duplicate values within that statement.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("display_name", sa.Text(), nullable=True),
        sa.Column("role", sa.String(5), nullable=False, server_default="user"),
        sa.Column("collection_limit", sa.Integer(), nullable=False, server_default="1000"),
        *_timestamps(),
    )

    # Create galleries table
    op.create_table(
        "galleries",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("status", sa.String(8), nullable=False, server_default="active"),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "slug", name="uq_galleries_user_slug"),
    )

    # Create collections table
    op.create_table(
        "collections",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "gallery_id",
            sa.Uuid(),
            sa.ForeignKey("galleries.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("status", sa.String(8), nullable=False, server_default="active"),
        *_timestamps(),
        sa.UniqueConstraint("gallery_id", "slug", name="uq_collections_gallery_slug"),
    )

    # Create artworks table
    op.create_table(
        "artworks",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(7), nullable=False, server_default="active"),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "slug", name="uq_artworks_user_slug"),
    )

    # Create collection_artworks junction table
    op.create_table(
        "collection_artworks",
        sa.Column(
            "collection_id",
            sa.Uuid(),
            sa.ForeignKey("collections.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "artwork_id",
            sa.Uuid(),
            sa.ForeignKey("artworks.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column(
            "added_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_index(
        "ix_collection_artworks_collection_position",
        "collection_artworks",
        ["collection_id", "position"],
    )
    op.create_index(
        "ix_collection_artworks_artwork",
        "collection_artworks",
        ["artwork_id"],
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_index("ix_collection_artworks_artwork", table_name="collection_artworks")
    op.drop_index("ix_collection_artworks_collection_position", table_name="collection_artworks")
    op.drop_table("collection_artworks")
    op.drop_table("artworks")
    op.drop_table("collections")
    op.drop_table("galleries")
    op.drop_table("users")
