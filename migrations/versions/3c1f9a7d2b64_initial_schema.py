"""initial_schema

Create the board schema:
- Users (points balance, preferred language, password reset window)
- Questions (optional video)
- Answers (upvote counter)
- Points transfers (append-only ledger)
- Login history (append-only)
- Change notification triggers feeding the realtime board

Revision ID: 3c1f9a7d2b64
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13; older servers need pgcrypto
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "preferred_language", sa.String(8), nullable=False, server_default="en"
        ),
        sa.Column(
            "password_reset_count", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("password_reset_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("points >= 0", name="ck_users_points_non_negative"),
        sa.CheckConstraint(
            "password_reset_count >= 0", name="ck_users_reset_count_non_negative"
        ),
        sa.CheckConstraint(
            "preferred_language IN ('en', 'es', 'hi', 'pt', 'zh', 'fr')",
            name="ck_users_language",
        ),
    )
    # Email lookups are case-insensitive
    op.execute("CREATE INDEX idx_users_email_lower ON users (lower(email))")

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_questions_created_at",
        "questions",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvotes >= 0", name="ck_answers_upvotes_non_negative"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])

    # ========================================================================
    # POINTS_TRANSFERS table (append-only)
    # ========================================================================
    op.create_table(
        "points_transfers",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("from_user_id", sa.UUID(), nullable=False),
        sa.Column("to_user_id", sa.UUID(), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["from_user_id"], ["users.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["to_user_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("amount > 0", name="ck_points_transfers_amount_positive"),
        sa.CheckConstraint(
            "from_user_id <> to_user_id", name="ck_points_transfers_distinct_parties"
        ),
    )
    op.create_index(
        "idx_points_transfers_from_user", "points_transfers", ["from_user_id"]
    )
    op.create_index("idx_points_transfers_to_user", "points_transfers", ["to_user_id"])

    # ========================================================================
    # LOGIN_HISTORY table (append-only)
    # ========================================================================
    op.create_table(
        "login_history",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("device_type", sa.String(16), nullable=False),
        sa.Column("browser", sa.Text(), nullable=False, server_default=""),
        sa.Column("os", sa.String(255), nullable=False, server_default=""),
        sa.Column("ip_address", sa.String(64), nullable=False, server_default=""),
        sa.Column(
            "login_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "device_type IN ('mobile', 'desktop')", name="ck_login_history_device_type"
        ),
    )
    op.create_index(
        "idx_login_history_user_login_at", "login_history", ["user_id", "login_at"]
    )

    # ========================================================================
    # CHANGE NOTIFICATIONS
    # ========================================================================
    # Publishes {"table", "op", "row": {"id"}} on board_changes for every row
    # change on questions and answers. Listeners reload; the payload is a hint.
    op.execute("""
        CREATE OR REPLACE FUNCTION board_notify_change()
        RETURNS TRIGGER AS $$
        DECLARE
            changed RECORD;
        BEGIN
            IF TG_OP = 'DELETE' THEN
                changed := OLD;
            ELSE
                changed := NEW;
            END IF;
            PERFORM pg_notify(
                'board_changes',
                json_build_object(
                    'table', TG_TABLE_NAME,
                    'op', lower(TG_OP),
                    'row', json_build_object('id', changed.id)
                )::text
            );
            RETURN NULL;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER notify_questions_change
        AFTER INSERT OR UPDATE OR DELETE ON questions
        FOR EACH ROW EXECUTE FUNCTION board_notify_change()
    """)

    op.execute("""
        CREATE TRIGGER notify_answers_change
        AFTER INSERT OR UPDATE OR DELETE ON answers
        FOR EACH ROW EXECUTE FUNCTION board_notify_change()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop triggers
    op.execute("DROP TRIGGER IF EXISTS notify_answers_change ON answers")
    op.execute("DROP TRIGGER IF EXISTS notify_questions_change ON questions")

    # Drop trigger functions
    op.execute("DROP FUNCTION IF EXISTS board_notify_change()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("login_history")
    op.drop_table("points_transfers")
    op.drop_table("answers")
    op.drop_table("questions")
    op.drop_table("users")
