"""SQLAlchemy table definitions for Quill.

These table definitions match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("email", String(255), nullable=False, unique=True),  # Stored lower-cased
    Column("password_hash", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "tags",
        postgresql.ARRAY(String(100)),
        nullable=False,
        server_default="{}",
    ),
    Column("body", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "state",
        postgresql.ENUM("draft", "published", name="post_state", create_type=False),
        nullable=False,
        server_default="draft",
    ),
    Column("read_count", Integer, nullable=False, server_default="0"),
    Column("reading_time", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("read_count >= 0", name="ck_posts_read_count_non_negative"),
    CheckConstraint("reading_time >= 0", name="ck_posts_reading_time_non_negative"),
)

# Public listing: WHERE state = 'published' ORDER BY created_at
Index("idx_posts_state_created_at", posts_table.c.state, posts_table.c.created_at)
# Author listing: WHERE author_id = ? ORDER BY created_at
Index(
    "idx_posts_author_created_at", posts_table.c.author_id, posts_table.c.created_at
)
