"""SQLAlchemy table definitions.

Repositories use SQLAlchemy Core against these tables and map rows to
pydantic domain models by hand. They match the schema created by the
Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (read model; owned by the content service)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("parent_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("author_id", UUID, nullable=False),  # Identity provider principal
    Column("content", Text, nullable=False),
    # Materialized path: ancestor ids, root first, direct parent last
    Column("path", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_visible", Boolean, nullable=False, server_default="true"),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("reports_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth = cardinality(path)", name="depth_matches_path"),
    CheckConstraint(
        "likes_count >= 0 AND reports_count >= 0", name="counters_non_negative"
    ),
)

Index(
    "idx_comments_post_roots",
    comments_table.c.post_id,
    comments_table.c.created_at,
    postgresql_where=comments_table.c.depth == 0,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id, comments_table.c.created_at)
Index("idx_comments_path", comments_table.c.path, postgresql_using="gin")

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reporter_id", UUID, nullable=False),
    Column(
        "reason_category",
        Enum(
            "spam",
            "harassment",
            "inappropriate",
            "misinformation",
            "other",
            name="report_reason",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("reason_text", String(500), nullable=True),
    Column(
        "status",
        Enum(
            "pending", "dismissed", "resolved", name="report_status", create_type=False
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_reports_status_created_at", reports_table.c.status, reports_table.c.created_at)
Index("idx_reports_comment_id", reports_table.c.comment_id)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="unique_like"),
)
