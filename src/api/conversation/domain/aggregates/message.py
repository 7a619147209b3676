"""Message entity for the conversation context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from conversation.domain.aggregates.chat_session import ChatSession
from conversation.domain.value_objects import Sender


@dataclass(frozen=True)
class Message:
    """One immutable turn of a conversation.

    The id is assigned by the store from a strictly increasing sequence
    and is what orders turns within a session.
    """

    id: int
    session_id: int
    sender: Sender
    content: str
    created_at: datetime


@dataclass(frozen=True)
class SessionSummary:
    """A session paired with its most recent message, for listings."""

    session: ChatSession
    last_message: Message | None = None
