"""add comment visibility

Comments that collect enough reports are hidden from regular readers until
a moderator dismisses the report.

Revision ID: 5a7e2b9c4d10
Revises: 3c1d9e0f6a27
Create Date: 2026-10-18 16:40:02.517733

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5a7e2b9c4d10"
down_revision: Union[str, Sequence[str], None] = "3c1d9e0f6a27"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "comments",
        sa.Column("is_visible", sa.Boolean(), nullable=False, server_default="true"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("comments", "is_visible")
