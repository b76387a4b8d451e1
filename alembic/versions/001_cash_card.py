"""Cash card table — flat, owner-scoped monetary records.

Revision ID: 001_cash_card
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_cash_card"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cash_card",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("amount", sa.Numeric(19, 2), nullable=False),
        sa.Column("owner", sa.String(256), nullable=False),
    )
    op.create_index("ix_cash_card_owner", "cash_card", ["owner"])


def downgrade() -> None:
    op.drop_index("ix_cash_card_owner", table_name="cash_card")
    op.drop_table("cash_card")
