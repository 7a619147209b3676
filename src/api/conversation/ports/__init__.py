"""Ports (interfaces) for the conversation bounded context."""

from conversation.ports.exceptions import (
    InvalidMessageError,
    OracleError,
    SessionNotFoundError,
    TitleAlreadyAssignedError,
)
from conversation.ports.oracle import IConversationOracle
from conversation.ports.repositories import IChatSessionRepository, IMessageRepository

__all__ = [
    "IChatSessionRepository",
    "IConversationOracle",
    "IMessageRepository",
    "InvalidMessageError",
    "OracleError",
    "SessionNotFoundError",
    "TitleAlreadyAssignedError",
]
