"""Conversions between conversation ORM models and domain objects."""

from __future__ import annotations

from conversation.domain.aggregates import ChatSession, Message
from conversation.domain.value_objects import Sender
from conversation.infrastructure.models import ChatSessionModel, MessageModel


def session_to_domain(model: ChatSessionModel) -> ChatSession:
    return ChatSession(
        id=model.id,
        tenant_id=model.tenant_id,
        title=model.title,
        created_at=model.created_at,
    )


def message_to_domain(model: MessageModel) -> Message:
    return Message(
        id=model.id,
        session_id=model.session_id,
        sender=Sender(model.sender),
        content=model.content,
        created_at=model.created_at,
    )
