"""create cart and coupon tables

Revision ID: 3f1c9a7b2d40
Revises:
Create Date: 2026-10-19 10:12:41.503918

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7b2d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "cart",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("customer_id", sa.String(), nullable=True),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_cart_customer_id", "cart", ["customer_id"])

    op.create_table(
        "coupon",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "coupon_type",
            sa.Enum("amount", "percentage", name="coupontype"),
            nullable=False,
        ),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("expiration", sa.DateTime(), nullable=False),
    )


def downgrade():
    op.drop_table("coupon")
    op.drop_index("ix_cart_customer_id", table_name="cart")
    op.drop_table("cart")
    sa.Enum(name="coupontype").drop(op.get_bind(), checkfirst=True)
