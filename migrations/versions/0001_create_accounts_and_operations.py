"""create accounts and operations tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

from beer_bank.models.types import Money, UTCDateTime


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("key", sa.String(length=255), nullable=False),
        sa.Column("balance", Money(), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
    )
    op.create_index("ix_accounts_key", "accounts", ["key"], unique=True)

    op.create_table(
        "operations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "account_id",
            sa.Integer(),
            sa.ForeignKey("accounts.id"),
            nullable=False,
        ),
        sa.Column(
            "operation_type",
            sa.Enum(
                "DEPOSIT",
                "WITHDRAWAL",
                name="operation_type_enum",
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column("amount", Money(), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
    )
    op.create_index(
        "ix_operations_account_id", "operations", ["account_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_operations_account_id", table_name="operations")
    op.drop_table("operations")
    op.drop_index("ix_accounts_key", table_name="accounts")
    op.drop_table("accounts")
    sa.Enum(name="operation_type_enum").drop(op.get_bind(), checkfirst=True)
