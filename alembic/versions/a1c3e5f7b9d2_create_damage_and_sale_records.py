"""create_damage_and_sale_records

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-19 09:00:00.000000

파손 기록(damage_records) 및 판매 기록(sale_records) 테이블 생성.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "a1c3e5f7b9d2"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "damage_records",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("sku", sa.String(64), nullable=False),
        sa.Column("product", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), server_default="pending", nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("responsible", sa.String(255), nullable=False),
        sa.Column("discount_rate", sa.Numeric(5, 4), server_default="0", nullable=False),
        sa.Column("sector", sa.String(30), nullable=True),
        sa.Column("photos", sa.JSON(), nullable=False, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_damage_records_sku", "damage_records", ["sku"])
    op.create_index("ix_damage_records_status", "damage_records", ["status"])

    op.create_table(
        "sale_records",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("product", sa.String(255), nullable=False),
        sa.Column("seller", sa.String(255), nullable=False),
        sa.Column("approver", sa.String(255), nullable=False),
        sa.Column("damage_id", sa.String(36), nullable=False),
        sa.Column("original_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("final_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("discount_rate", sa.Numeric(5, 4), server_default="0", nullable=False),
        sa.Column("sector", sa.String(30), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_sale_records_date", "sale_records", ["date"])


def downgrade() -> None:
    op.drop_index("ix_sale_records_date")
    op.drop_table("sale_records")
    op.drop_index("ix_damage_records_status")
    op.drop_index("ix_damage_records_sku")
    op.drop_table("damage_records")
