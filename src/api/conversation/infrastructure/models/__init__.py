"""SQLAlchemy ORM models for the conversation bounded context."""

from conversation.infrastructure.models.chat_session import ChatSessionModel
from conversation.infrastructure.models.message import MessageModel

__all__ = [
    "ChatSessionModel",
    "MessageModel",
]
