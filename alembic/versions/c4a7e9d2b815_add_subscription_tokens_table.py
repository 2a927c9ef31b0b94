"""Add subscription tokens table

Revision ID: c4a7e9d2b815
Revises: 8b2e4d6f1a93
Create Date: 2026-10-14

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c4a7e9d2b815"
down_revision: Union[str, Sequence[str], None] = "8b2e4d6f1a93"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "subscription_tokens",
        sa.Column("subscription_token", sa.String(length=25), nullable=False),
        sa.Column("subscriber_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ["subscriber_id"],
            ["subscriptions.id"],
            name=op.f("fk_subscription_tokens_subscriber_id_subscriptions"),
        ),
        sa.PrimaryKeyConstraint("subscription_token", name=op.f("pk_subscription_tokens")),
    )
    op.create_index(
        "idx_subscription_tokens_subscriber_id",
        "subscription_tokens",
        ["subscriber_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_subscription_tokens_subscriber_id", table_name="subscription_tokens")
    op.drop_table("subscription_tokens")
