"""create questions

Revision ID: base_0001
Revises:
Create Date: 2025-11-03 18:12:40.104233

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "base_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("difficulty", sa.String(length=16), nullable=False, server_default="facil"),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=True),
        sa.Column("correct_index", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("used_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_questions_created_at", "questions", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_questions_created_at", table_name="questions")
    op.drop_table("questions")
