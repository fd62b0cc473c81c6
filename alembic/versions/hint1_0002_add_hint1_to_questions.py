"""add hint1 to questions

Revision ID: hint1_0002
Revises: base_0001
Create Date: 2026-01-14 09:27:05.518842

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "hint1_0002"
down_revision: Union[str, Sequence[str], None] = "base_0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # nullable: rows created before hints existed have none
    op.add_column("questions", sa.Column("hint1", sa.Text(), nullable=True))


def downgrade() -> None:
    op.drop_column("questions", "hint1")
