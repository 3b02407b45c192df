"""initial_schema

Create the engagement schema:
- Comments (threaded via parent pointer, soft-deleted, moderated)
- Reactions (one live reaction per actor per content item)

Revision ID: 3c41f0d9b2e7
Revises:
Create Date: 2026-10-19 10:12:44.512903

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41f0d9b2e7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

REACTION_TYPES = (
    # core
    "like",
    "love",
    "heart",
    "laugh",
    "wow",
    "sad",
    "angry",
    # family
    "blessing",
    "pride",
    "gratitude",
    "memory",
    "wisdom",
    "tradition",
    "respect",
    "honor",
    "legacy",
    "heritage",
    # generational
    "grandparent",
    "parent",
    "child",
    "sibling",
    # cultural
    "namaste",
    "om",
    "festival",
    "prayer",
    "ritual",
)

MODERATION_STATUSES = ("pending", "approved", "rejected", "flagged", "auto_approved")


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE visibility_status AS ENUM ('active', 'deleted');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE moderation_status AS ENUM ({_enum_values(MODERATION_STATUSES)});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE reaction_type AS ENUM ({_enum_values(REACTION_TYPES)});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # COMMENTS table (parent pointer, unlimited depth)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),  # NULL for top-level
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "mentions",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "hashtags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "media_refs",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("cohort_level", sa.Integer(), nullable=True),
        sa.Column(
            "cultural_tags",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("language_code", sa.String(5), nullable=True),
        sa.Column("sentiment_score", sa.Float(), nullable=True),
        sa.Column("is_anonymous", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_private", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "visibility_status",
            postgresql.ENUM(
                "active", "deleted", name="visibility_status", create_type=False
            ),
            nullable=False,
            server_default="active",
        ),
        sa.Column(
            "moderation_status",
            postgresql.ENUM(
                *MODERATION_STATUSES, name="moderation_status", create_type=False
            ),
            nullable=False,
            server_default="auto_approved",
        ),
        sa.Column("is_edited", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("edit_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "edit_history",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "audit_log",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="comments_depth_non_negative"),
        sa.CheckConstraint(
            "reply_count >= 0", name="comments_reply_count_non_negative"
        ),
        sa.CheckConstraint("like_count >= 0", name="comments_like_count_non_negative"),
    )
    op.create_index("idx_comments_content_id", "comments", ["content_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])
    op.create_index(
        "idx_comments_moderation_status", "comments", ["moderation_status"]
    )
    op.create_index("idx_comments_cohort_level", "comments", ["cohort_level"])
    op.create_index(
        "idx_comments_hashtags", "comments", ["hashtags"], postgresql_using="gin"
    )
    op.create_index(
        "idx_comments_cultural_tags",
        "comments",
        ["cultural_tags"],
        postgresql_using="gin",
    )

    # ========================================================================
    # REACTIONS table (content_id is a content item or a comment)
    # ========================================================================
    op.create_table(
        "reactions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column(
            "reaction_type",
            postgresql.ENUM(*REACTION_TYPES, name="reaction_type", create_type=False),
            nullable=False,
        ),
        sa.Column("intensity", sa.SmallInteger(), nullable=False, server_default="1"),
        sa.Column("cohort_level", sa.Integer(), nullable=True),
        sa.Column(
            "cultural_tags",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("is_anonymous", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_private", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        # One live reaction per actor per content item
        sa.UniqueConstraint(
            "content_id", "actor_id", name="uq_reactions_content_actor"
        ),
        sa.CheckConstraint(
            "intensity BETWEEN 1 AND 5", name="reactions_intensity_range"
        ),
    )
    op.create_index("idx_reactions_actor_id", "reactions", ["actor_id"])
    op.create_index("idx_reactions_updated_at", "reactions", ["updated_at"])
    op.create_index("idx_reactions_cohort_level", "reactions", ["cohort_level"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("reactions")
    op.drop_table("comments")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS reaction_type")
    op.execute("DROP TYPE IF EXISTS moderation_status")
    op.execute("DROP TYPE IF EXISTS visibility_status")

    # Drop extensions (commented out to avoid issues with shared extensions)
    # op.execute("DROP EXTENSION IF EXISTS \"uuid-ossp\"")


def _enum_values(values: Sequence[str]) -> str:
    return ", ".join(f"'{value}'" for value in values)
