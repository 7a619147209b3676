"""create tenants table

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-19 09:12:41.208113

Creates the tenants table. A tenant is the holder of one API key; only
the bcrypt hash and the lookup prefix of the key are stored.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create tenants table."""
    op.create_table(
        "tenants",
        sa.Column("id", sa.String(length=26), nullable=False),  # ULID
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("key_hash", sa.String(length=255), nullable=False),
        sa.Column("prefix", sa.String(length=12), nullable=False),
        sa.Column("active", sa.Boolean, nullable=False, server_default="true"),
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
        sa.UniqueConstraint("key_hash", name="uq_tenants_key_hash"),
    )
    # Authentication resolves a key to at most one tenant by prefix
    op.create_index("ix_tenants_prefix", "tenants", ["prefix"], unique=True)


def downgrade() -> None:
    """Drop tenants table."""
    op.drop_index("ix_tenants_prefix", table_name="tenants")
    op.drop_table("tenants")
