"""SQLAlchemy table definitions for Research Hub.

These table definitions are used with SQLAlchemy Core; rows are mapped to the
pydantic domain models in ``hub.persistence.mappers``. They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(255), nullable=False, unique=True),  # Stored lowercased
    Column("password_hash", String(255), nullable=False),
    Column("first_name", String(50), nullable=False),
    Column("last_name", String(50), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("bio", String(500), nullable=True),
    Column("phone", String(32), nullable=True),
    Column("institution", String(100), nullable=False),
    Column("department", String(100), nullable=True),
    Column("field_of_study", String(100), nullable=False),
    Column("academic_level", String(20), nullable=False),
    Column("graduation_year", Integer, nullable=True),
    Column("research_interests", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("skills", ARRAY(String(30)), nullable=False, server_default="{}"),
    Column("social_links", JSONB, nullable=False, server_default="{}"),
    Column("preferences", JSONB, nullable=False, server_default="{}"),
    Column("is_email_verified", Boolean, nullable=False, server_default="false"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("last_login", TIMESTAMP(timezone=True), nullable=True),
    Column("login_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_institution", users_table.c.institution)
Index("idx_users_field_of_study", users_table.c.field_of_study)

# ============================================================================
# GROUPS TABLE
# ============================================================================
groups_table = Table(
    "groups",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("description", String(500), nullable=False),
    Column("owner_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column("field_of_study", String(100), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_groups_name", groups_table.c.name)
Index("idx_groups_owner_id", groups_table.c.owner_id)
Index("idx_groups_public_active", groups_table.c.is_public, groups_table.c.is_active)

# ============================================================================
# GROUP MEMBERS TABLE (owner included)
# ============================================================================
group_members_table = Table(
    "group_members",
    metadata,
    Column(
        "group_id", UUID, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("group_id", "user_id", name="pk_group_members"),
)

Index("idx_group_members_user_id", group_members_table.c.user_id)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "group_id", UUID, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    ),
    Column("invited_by", UUID, ForeignKey("users.id"), nullable=False),
    Column("email", String(255), nullable=False),
    Column("message", String(500), nullable=True),
    Column("token", String(64), nullable=False, unique=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("accepted_by", UUID, ForeignKey("users.id"), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'declined', 'expired')",
        name="check_invitation_status",
    ),
)

Index(
    "idx_invitations_email_group",
    invitations_table.c.email,
    invitations_table.c.group_id,
)

# ============================================================================
# PAPERS TABLE
# ============================================================================
papers_table = Table(
    "papers",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("description", String(1000), nullable=True),
    Column("file_name", String(255), nullable=False),
    Column("original_file_name", String(255), nullable=False),
    Column("file_path", Text, nullable=False),
    Column("file_size", BigInteger, nullable=False),
    Column("mime_type", String(100), nullable=False),
    Column(
        "group_id", UUID, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    ),
    Column("uploaded_by", UUID, ForeignKey("users.id"), nullable=False),
    Column("authors", JSONB, nullable=False, server_default="[]"),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("category", String(20), nullable=False, server_default="research"),
    Column("journal", String(255), nullable=True),
    Column("published_date", TIMESTAMP(timezone=True), nullable=True),
    Column("doi", String(255), nullable=True),
    Column("url", Text, nullable=True),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column("download_count", Integer, nullable=False, server_default="0"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_papers_group_created", papers_table.c.group_id, papers_table.c.created_at)
Index("idx_papers_tags", papers_table.c.tags, postgresql_using="gin")

# ============================================================================
# PAPER RATINGS TABLE (one per user per paper)
# ============================================================================
paper_ratings_table = Table(
    "paper_ratings",
    metadata,
    Column(
        "paper_id", UUID, ForeignKey("papers.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("rating", Integer, nullable=False),
    Column("review", String(300), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("paper_id", "user_id", name="pk_paper_ratings"),
    CheckConstraint("rating BETWEEN 1 AND 5", name="check_rating_range"),
)

# ============================================================================
# PAPER COMMENTS TABLE
# ============================================================================
# parent_id has no foreign key: deleting a comment leaves its replies in
# place, and they are shown at the top level.
paper_comments_table = Table(
    "paper_comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "paper_id", UUID, ForeignKey("papers.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("content", String(1000), nullable=False),
    Column("parent_id", UUID, nullable=True),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_paper_comments_paper_created",
    paper_comments_table.c.paper_id,
    paper_comments_table.c.created_at,
)

# ============================================================================
# DISCUSSIONS TABLE
# ============================================================================
discussions_table = Table(
    "discussions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "group_id", UUID, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("title", String(200), nullable=False),
    Column("content", String(5000), nullable=False),
    Column("category", String(20), nullable=False, server_default="general"),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("is_locked", Boolean, nullable=False, server_default="false"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column(
        "last_activity",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("last_reply_author_id", UUID, nullable=True),
    Column("last_reply_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_discussions_group_activity",
    discussions_table.c.group_id,
    discussions_table.c.is_pinned.desc(),
    discussions_table.c.last_activity.desc(),
)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "discussion_id",
        UUID,
        ForeignKey("discussions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("content", String(3000), nullable=False),
    Column("parent_id", UUID, nullable=True),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("helpful", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_replies_discussion_created",
    replies_table.c.discussion_id,
    replies_table.c.created_at,
)
