"""journal entries and tags

Revision ID: 20260101_journal_initial
Revises:
Create Date: 2026-01-01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20260101_journal_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "journal_entry",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("entry_date", sa.Date(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("primary_mood", sa.String(length=64), nullable=False, server_default=""),
        sa.Column("secondary_moods", sa.JSON(), nullable=True),
        sa.Column("word_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_journal_entry_user_id", "journal_entry", ["user_id"])
    op.create_index(
        "ux_journal_entry_user_entry_date",
        "journal_entry",
        ["user_id", "entry_date"],
        unique=True,
    )
    op.create_index("ix_journal_entry_user_primary_mood", "journal_entry", ["user_id", "primary_mood"])

    op.create_table(
        "journal_entry_tag",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "entry_id",
            sa.Integer(),
            sa.ForeignKey("journal_entry.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_journal_entry_tag_entry_id", "journal_entry_tag", ["entry_id"])
    op.create_index("ix_journal_entry_tag_name", "journal_entry_tag", ["name"])


def downgrade():
    op.drop_index("ix_journal_entry_tag_name", table_name="journal_entry_tag")
    op.drop_index("ix_journal_entry_tag_entry_id", table_name="journal_entry_tag")
    op.drop_table("journal_entry_tag")
    op.drop_index("ix_journal_entry_user_primary_mood", table_name="journal_entry")
    op.drop_index("ux_journal_entry_user_entry_date", table_name="journal_entry")
    op.drop_index("ix_journal_entry_user_id", table_name="journal_entry")
    op.drop_table("journal_entry")
