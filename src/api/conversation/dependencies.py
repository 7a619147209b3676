"""FastAPI dependency providers for the conversation bounded context.

The model client and the lock registry are process-wide; repositories and
services are built per request around the request's database session.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from google import genai
from google.genai import types
from sqlalchemy.ext.asyncio import AsyncSession

from conversation.application.access_gate import SessionAccessGate
from conversation.application.observability import (
    DefaultReplayEngineProbe,
    DefaultSessionServiceProbe,
    ReplayEngineProbe,
    SessionServiceProbe,
)
from conversation.application.services import ReplayEngine, SessionService
from conversation.application.session_locks import SessionLockRegistry
from conversation.infrastructure.gemini_oracle import GeminiConversationOracle
from conversation.infrastructure.message_repository import MessageRepository
from conversation.infrastructure.observability import (
    ConversationRepositoryProbe,
    DefaultConversationRepositoryProbe,
    DefaultOracleProbe,
)
from conversation.infrastructure.session_repository import ChatSessionRepository
from conversation.ports.oracle import IConversationOracle
from infrastructure.database.dependencies import get_write_session
from infrastructure.settings import get_oracle_settings
from shared_kernel.middleware import get_observation_context
from shared_kernel.observability_context import ObservationContext


@lru_cache
def get_oracle() -> IConversationOracle:
    """Get the process-wide conversational model client.

    Returns:
        GeminiConversationOracle configured from OracleSettings
    """
    settings = get_oracle_settings()
    http_options = None
    if settings.timeout_seconds is not None:
        # HttpOptions.timeout is expressed in milliseconds
        http_options = types.HttpOptions(timeout=int(settings.timeout_seconds * 1000))

    client = genai.Client(
        api_key=settings.api_key.get_secret_value() or None,
        http_options=http_options,
    )
    return GeminiConversationOracle(
        client=client,
        model=settings.model,
        title_model=settings.effective_title_model,
    )


@lru_cache
def get_session_lock_registry() -> SessionLockRegistry:
    """Get the process-wide per-session lock registry."""
    return SessionLockRegistry()


def get_conversation_repository_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> ConversationRepositoryProbe:
    return DefaultConversationRepositoryProbe().with_context(context)


def get_session_service_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> SessionServiceProbe:
    return DefaultSessionServiceProbe().with_context(context)


def get_replay_engine_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> ReplayEngineProbe:
    return DefaultReplayEngineProbe().with_context(context)


def get_chat_session_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[ConversationRepositoryProbe, Depends(get_conversation_repository_probe)],
) -> ChatSessionRepository:
    """Get ChatSessionRepository instance.

    Args:
        session: Async database session
        probe: Repository probe bound to the request context

    Returns:
        ChatSessionRepository instance
    """
    return ChatSessionRepository(session=session, probe=probe)


def get_message_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[ConversationRepositoryProbe, Depends(get_conversation_repository_probe)],
) -> MessageRepository:
    """Get MessageRepository instance."""
    return MessageRepository(session=session, probe=probe)


def get_session_access_gate(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    session_repo: Annotated[ChatSessionRepository, Depends(get_chat_session_repository)],
    probe: Annotated[SessionServiceProbe, Depends(get_session_service_probe)],
) -> SessionAccessGate:
    """Get SessionAccessGate instance."""
    return SessionAccessGate(
        session=session,
        session_repository=session_repo,
        probe=probe,
    )


def get_session_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    session_repo: Annotated[ChatSessionRepository, Depends(get_chat_session_repository)],
    message_repo: Annotated[MessageRepository, Depends(get_message_repository)],
    oracle: Annotated[IConversationOracle, Depends(get_oracle)],
    probe: Annotated[SessionServiceProbe, Depends(get_session_service_probe)],
) -> SessionService:
    """Get SessionService instance.

    Args:
        session: Database session for transaction management
        session_repo: Chat session repository (shares session via dependency caching)
        message_repo: Message repository (shares session via dependency caching)
        oracle: Conversational model used for titles
        probe: Session service probe for observability

    Returns:
        SessionService instance
    """
    return SessionService(
        session=session,
        session_repository=session_repo,
        message_repository=message_repo,
        oracle=oracle,
        probe=probe,
    )


def get_replay_engine(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    message_repo: Annotated[MessageRepository, Depends(get_message_repository)],
    session_service: Annotated[SessionService, Depends(get_session_service)],
    oracle: Annotated[IConversationOracle, Depends(get_oracle)],
    locks: Annotated[SessionLockRegistry, Depends(get_session_lock_registry)],
    probe: Annotated[ReplayEngineProbe, Depends(get_replay_engine_probe)],
) -> ReplayEngine:
    """Get ReplayEngine instance."""
    return ReplayEngine(
        session=session,
        message_repository=message_repo,
        session_service=session_service,
        oracle=oracle,
        locks=locks,
        probe=probe,
    )
