"""create messages table

Revision ID: c57a0e3f9b12
Revises: 8e4b2d6c1a95
Create Date: 2026-10-19 09:26:55.940318

Messages are append-only. The identity column orders the turns of a
session, so no created_at index is needed for history reads.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "c57a0e3f9b12"
down_revision: Union[str, Sequence[str], None] = "8e4b2d6c1a95"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create messages table."""
    op.create_table(
        "messages",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("session_id", sa.Integer, nullable=False),
        sa.Column("sender", sa.String(length=10), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["chat_sessions.id"],
            name="fk_messages_session_id",
            ondelete="RESTRICT",
        ),
        sa.CheckConstraint("sender IN ('user', 'bot')", name="ck_messages_sender"),
    )
    op.create_index("ix_messages_session_id", "messages", ["session_id"])


def downgrade() -> None:
    """Drop messages table."""
    op.drop_index("ix_messages_session_id", table_name="messages")
    op.drop_table("messages")
