"""SQLAlchemy ORM model for the messages table.

Rows are append-only. The autoincrement id is the ordering key for the
turns of a session; created_at is informational.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, CreatedAtMixin


class MessageModel(Base, CreatedAtMixin):
    """ORM model for messages table."""

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    session_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("chat_sessions.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    sender: Mapped[str] = mapped_column(String(10), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<MessageModel(id={self.id}, session_id={self.session_id}, "
            f"sender={self.sender})>"
        )
