"""SQLAlchemy table definitions for the engagement store.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

from engage.domain.value import ModerationStatus, ReactionType, VisibilityStatus

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("content_id", UUID, nullable=False),  # Owned by the content service
    Column("author_id", UUID, nullable=False),
    Column("parent_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("text", Text, nullable=False),
    Column("mentions", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("hashtags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("media_refs", ARRAY(Text), nullable=False, server_default="{}"),
    Column("cohort_level", Integer, nullable=True),
    Column("cultural_tags", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column("language_code", String(5), nullable=True),
    Column("sentiment_score", Float, nullable=True),  # Supplied externally
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("is_private", Boolean, nullable=False, server_default="false"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column(
        "visibility_status",
        Enum(
            *[s.value for s in VisibilityStatus],
            name="visibility_status",
            create_type=False,
        ),
        nullable=False,
        server_default=VisibilityStatus.ACTIVE.value,
    ),
    Column(
        "moderation_status",
        Enum(
            *[s.value for s in ModerationStatus],
            name="moderation_status",
            create_type=False,
        ),
        nullable=False,
        server_default=ModerationStatus.AUTO_APPROVED.value,
    ),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edit_count", Integer, nullable=False, server_default="0"),
    Column("edit_history", JSONB, nullable=False, server_default="[]"),
    Column("audit_log", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("depth >= 0", name="comments_depth_non_negative"),
    CheckConstraint("reply_count >= 0", name="comments_reply_count_non_negative"),
    CheckConstraint("like_count >= 0", name="comments_like_count_non_negative"),
)

Index("idx_comments_content_id", comments_table.c.content_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_moderation_status", comments_table.c.moderation_status)
Index("idx_comments_cohort_level", comments_table.c.cohort_level)
Index("idx_comments_hashtags", comments_table.c.hashtags, postgresql_using="gin")
Index(
    "idx_comments_cultural_tags",
    comments_table.c.cultural_tags,
    postgresql_using="gin",
)

# ============================================================================
# REACTIONS TABLE
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("content_id", UUID, nullable=False),  # Content item or comment id
    Column("actor_id", UUID, nullable=False),
    Column(
        "reaction_type",
        Enum(*[t.value for t in ReactionType], name="reaction_type", create_type=False),
        nullable=False,
    ),
    Column("intensity", SmallInteger, nullable=False, server_default="1"),
    Column("cohort_level", Integer, nullable=True),
    Column("cultural_tags", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("is_private", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("content_id", "actor_id", name="uq_reactions_content_actor"),
    CheckConstraint("intensity BETWEEN 1 AND 5", name="reactions_intensity_range"),
)

Index("idx_reactions_actor_id", reactions_table.c.actor_id)
Index("idx_reactions_updated_at", reactions_table.c.updated_at)
Index("idx_reactions_cohort_level", reactions_table.c.cohort_level)
