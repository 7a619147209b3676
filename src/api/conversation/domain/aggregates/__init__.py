"""Domain aggregates for the conversation context."""

from conversation.domain.aggregates.chat_session import ChatSession
from conversation.domain.aggregates.message import Message, SessionSummary

__all__ = [
    "ChatSession",
    "Message",
    "SessionSummary",
]
