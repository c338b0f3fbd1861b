"""Create pets and coin_balances tables

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "pets",
        sa.Column("owner", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("birthdate", sa.BigInteger(), nullable=False),
        sa.Column("last_updated", sa.BigInteger(), nullable=False),
        sa.Column("is_alive", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("hunger", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("happiness", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("energy", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("has_glasses", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.CheckConstraint("hunger BETWEEN 0 AND 100", name="ck_pets_hunger_range"),
        sa.CheckConstraint("happiness BETWEEN 0 AND 100", name="ck_pets_happiness_range"),
        sa.CheckConstraint("energy BETWEEN 0 AND 100", name="ck_pets_energy_range"),
        sa.PrimaryKeyConstraint("owner"),
    )
    op.create_table(
        "coin_balances",
        sa.Column("owner", sa.String(length=255), nullable=False),
        sa.Column("balance", sa.BigInteger(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("owner"),
    )


def downgrade() -> None:
    op.drop_table("coin_balances")
    op.drop_table("pets")
