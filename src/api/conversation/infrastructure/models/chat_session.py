"""SQLAlchemy ORM model for the chat_sessions table."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ChatSessionModel(Base, TimestampMixin):
    """ORM model for chat_sessions table.

    Notes:
    - id is an autoincrement integer exposed to clients as sessionId
    - tenant_id references tenants.id and never changes
    - title stays NULL until the first user turn
    """

    __tablename__ = "chat_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("tenants.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ChatSessionModel(id={self.id}, tenant_id={self.tenant_id})>"
