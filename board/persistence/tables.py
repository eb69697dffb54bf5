"""SQLAlchemy table definitions for the board.

They match the schema defined in Alembic migrations.
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
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("preferred_language", String(8), nullable=False, server_default="en"),
    Column("password_reset_count", Integer, nullable=False, server_default="0"),
    Column("password_reset_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("points >= 0", name="ck_users_points_non_negative"),
    CheckConstraint(
        "password_reset_count >= 0", name="ck_users_reset_count_non_negative"
    ),
    CheckConstraint(
        "preferred_language IN ('en', 'es', 'hi', 'pt', 'zh', 'fr')",
        name="ck_users_language",
    ),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column("video_url", Text, nullable=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="ck_answers_upvotes_non_negative"),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# POINTS TRANSFERS TABLE (append-only)
# ============================================================================
points_transfers_table = Table(
    "points_transfers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "from_user_id", UUID, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False
    ),
    Column(
        "to_user_id", UUID, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("amount", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("amount > 0", name="ck_points_transfers_amount_positive"),
    CheckConstraint(
        "from_user_id <> to_user_id", name="ck_points_transfers_distinct_parties"
    ),
)

Index("idx_points_transfers_from_user", points_transfers_table.c.from_user_id)
Index("idx_points_transfers_to_user", points_transfers_table.c.to_user_id)

# ============================================================================
# LOGIN HISTORY TABLE (append-only)
# ============================================================================
login_history_table = Table(
    "login_history",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("device_type", String(16), nullable=False),
    Column("browser", Text, nullable=False, server_default=""),
    Column("os", String(255), nullable=False, server_default=""),
    Column("ip_address", String(64), nullable=False, server_default=""),
    Column(
        "login_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "device_type IN ('mobile', 'desktop')", name="ck_login_history_device_type"
    ),
)

Index("idx_login_history_user_login_at", login_history_table.c.user_id, login_history_table.c.login_at)
