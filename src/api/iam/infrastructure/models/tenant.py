"""SQLAlchemy ORM model for the tenants table.

Stores tenant API key metadata in PostgreSQL. The key_hash is the only
sensitive data stored - the plaintext key is never persisted.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class TenantModel(Base, TimestampMixin):
    """ORM model for tenants table.

    Notes:
    - id is VARCHAR(26) for ULID format
    - key_hash is unique and holds the bcrypt hash of the API key
    - prefix is unique so authentication resolves at most one candidate
    - names are display-only and may repeat
    """

    __tablename__ = "tenants"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    key_hash: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    prefix: Mapped[str] = mapped_column(
        String(12), nullable=False, unique=True, index=True
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<TenantModel(id={self.id}, name={self.name}, active={self.active})>"
