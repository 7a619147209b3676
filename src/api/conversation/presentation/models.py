"""Pydantic models for chat requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from conversation.domain.aggregates import ChatSession, Message, SessionSummary
from conversation.domain.value_objects import Sender
from shared_kernel.api_models import ApiModel


class StartChatRequest(ApiModel):
    """Request model for opening a conversation with its first message."""

    message: str = Field(..., description="Opening user message", min_length=1)


class SendMessageRequest(ApiModel):
    """Request model for a follow-up message on an existing session."""

    session_id: int = Field(..., description="Session to post into")
    message: str = Field(..., description="User message", min_length=1)


class MessageResponse(ApiModel):
    """Response model for one conversation turn."""

    id: int = Field(..., description="Message ID; orders turns within a session")
    session_id: int = Field(..., description="Session the turn belongs to")
    sender: Sender = Field(..., description="Author of the turn (user or bot)")
    content: str = Field(..., description="Turn text")
    created_at: datetime = Field(..., description="When the turn was stored")

    @classmethod
    def from_domain(cls, message: Message) -> MessageResponse:
        return cls(
            id=message.id,
            session_id=message.session_id,
            sender=message.sender,
            content=message.content,
            created_at=message.created_at,
        )


class ChatSessionResponse(ApiModel):
    """Response model for a chat session."""

    id: int = Field(..., description="Session ID")
    tenant_id: str = Field(..., description="Owning tenant ID")
    title: str | None = Field(None, description="Title, set on the first turn")
    created_at: datetime = Field(..., description="When the session was created")

    @classmethod
    def from_domain(cls, chat_session: ChatSession) -> ChatSessionResponse:
        return cls(
            id=chat_session.id,
            tenant_id=chat_session.tenant_id,
            title=chat_session.title,
            created_at=chat_session.created_at,
        )


class SessionSummaryResponse(ChatSessionResponse):
    """Response model for the session list, with the latest turn attached."""

    last_message: MessageResponse | None = Field(
        None, description="Most recent turn, or null for an empty session"
    )

    @classmethod
    def from_summary(cls, summary: SessionSummary) -> SessionSummaryResponse:
        last_message = None
        if summary.last_message is not None:
            last_message = MessageResponse.from_domain(summary.last_message)

        return cls(
            **ChatSessionResponse.from_domain(summary.session).model_dump(),
            last_message=last_message,
        )


class StartChatResponse(ApiModel):
    """Response model for a newly started conversation."""

    session: ChatSessionResponse = Field(..., description="The created, titled session")
    message: MessageResponse = Field(..., description="The bot's first reply")
