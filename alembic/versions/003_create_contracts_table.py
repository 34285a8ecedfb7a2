"""create contracts table

Revision ID: 003
Revises: 002
Create Date: 2026-10-17 10:10:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "contracts",
        sa.Column("id", sa.String(32), nullable=False),
        # No foreign key: the game reference is not enforced
        sa.Column("game_id", sa.String(32), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column("customer_info", sa.JSON(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("payment_method", sa.String(50), nullable=True),
        sa.Column("shipment_method", sa.String(50), nullable=True),
        sa.Column("shipping_fee", sa.Numeric(10, 2), nullable=True),
        sa.Column("late_fee", sa.Numeric(10, 2), nullable=True),
        sa.Column("total_cost", sa.Numeric(10, 2), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('Pending', 'Active', 'Completed', 'Canceled')",
            name="ck_contracts_status",
        ),
        # CHECK constraint: monetary amounts are non-negative when present
        sa.CheckConstraint(
            "(shipping_fee IS NULL OR shipping_fee >= 0)"
            " AND (late_fee IS NULL OR late_fee >= 0)"
            " AND (total_cost IS NULL OR total_cost >= 0)",
            name="ck_contracts_amounts_non_negative",
        ),
        sa.CheckConstraint(
            "start_date IS NULL OR end_date IS NULL OR end_date >= start_date",
            name="ck_contracts_end_date_after_start_date",
        ),
    )
    op.create_index("ix_contracts_game_id", "contracts", ["game_id"], unique=False)
    op.create_index("ix_contracts_status", "contracts", ["status"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_contracts_status", table_name="contracts")
    op.drop_index("ix_contracts_game_id", table_name="contracts")
    op.drop_table("contracts")
