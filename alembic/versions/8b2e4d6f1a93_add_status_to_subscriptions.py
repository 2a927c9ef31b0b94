"""Add status to subscriptions

Existing rows predate double opt-in and are treated as confirmed.

Revision ID: 8b2e4d6f1a93
Revises: 3f1c9a7b2d40
Create Date: 2026-10-13

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8b2e4d6f1a93"
down_revision: Union[str, Sequence[str], None] = "3f1c9a7b2d40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column("subscriptions", sa.Column("status", sa.String(length=32), nullable=True))
    op.execute("UPDATE subscriptions SET status = 'confirmed' WHERE status IS NULL")
    op.alter_column("subscriptions", "status", nullable=False)
    op.create_index("idx_subscriptions_status", "subscriptions", ["status"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_subscriptions_status", table_name="subscriptions")
    op.drop_column("subscriptions", "status")
