"""create games table

Revision ID: 001
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "games",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("genre", sa.JSON(), nullable=False),
        sa.Column("platform", sa.String(100), nullable=False),
        sa.Column("explore", sa.JSON(), nullable=False),
        sa.Column("release_date", sa.Date(), nullable=True),
        sa.Column("developer", sa.JSON(), nullable=False),
        sa.Column("publisher", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("esrb_rating", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_games_title", "games", ["title"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_games_title", table_name="games")
    op.drop_table("games")
