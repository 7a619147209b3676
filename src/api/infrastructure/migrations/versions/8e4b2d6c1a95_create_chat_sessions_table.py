"""create chat_sessions table

Revision ID: 8e4b2d6c1a95
Revises: 3c1f9a2b7d40
Create Date: 2026-10-19 09:20:03.517452

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "8e4b2d6c1a95"
down_revision: Union[str, Sequence[str], None] = "3c1f9a2b7d40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create chat_sessions table owned by tenants."""
    op.create_table(
        "chat_sessions",
        sa.Column("id", sa.Integer, sa.Identity(), nullable=False),
        sa.Column("tenant_id", sa.String(length=26), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["tenant_id"],
            ["tenants.id"],
            name="fk_chat_sessions_tenant_id",
            ondelete="RESTRICT",
        ),
    )
    op.create_index("ix_chat_sessions_tenant_id", "chat_sessions", ["tenant_id"])


def downgrade() -> None:
    """Drop chat_sessions table."""
    op.drop_index("ix_chat_sessions_tenant_id", table_name="chat_sessions")
    op.drop_table("chat_sessions")
