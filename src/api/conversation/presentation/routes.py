"""HTTP routes for chat sessions and messages.

Every route authenticates through the X-API-Key header and only ever
touches sessions owned by the calling tenant.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from conversation.application.access_gate import SessionAccessGate
from conversation.application.services import ReplayEngine, SessionService
from conversation.dependencies import (
    get_replay_engine,
    get_session_access_gate,
    get_session_service,
)
from conversation.ports.exceptions import (
    InvalidMessageError,
    OracleError,
    SessionNotFoundError,
)
from conversation.presentation.models import (
    ChatSessionResponse,
    MessageResponse,
    SendMessageRequest,
    SessionSummaryResponse,
    StartChatRequest,
    StartChatResponse,
)
from iam.dependencies import get_current_tenant
from iam.domain.aggregates import Tenant
from shared_kernel.exceptions import PersistenceError

router = APIRouter(
    prefix="/api/chat",
    tags=["Chat"],
)


@router.post("/start")
async def start_chat(
    request: StartChatRequest,
    tenant: Annotated[Tenant, Depends(get_current_tenant)],
    engine: Annotated[ReplayEngine, Depends(get_replay_engine)],
) -> StartChatResponse:
    """Start a new session with an opening message.

    The session is titled from the opening message and the bot's first
    reply is returned alongside it.

    Raises:
        HTTPException: 400 if the message is blank
        HTTPException: 502 if the conversational model fails
        HTTPException: 500 if the store fails
    """
    try:
        chat_session, bot_message = await engine.start_conversation(
            tenant.id.value, request.message
        )
    except InvalidMessageError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except OracleError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Something went wrong processing the AI response",
        ) from e
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create session",
        ) from e

    return StartChatResponse(
        session=ChatSessionResponse.from_domain(chat_session),
        message=MessageResponse.from_domain(bot_message),
    )


@router.post("/message")
async def send_message(
    request: SendMessageRequest,
    tenant: Annotated[Tenant, Depends(get_current_tenant)],
    gate: Annotated[SessionAccessGate, Depends(get_session_access_gate)],
    engine: Annotated[ReplayEngine, Depends(get_replay_engine)],
) -> MessageResponse:
    """Send a message on an existing session and return the bot reply.

    If the conversational model fails, the user message is kept and the
    request reports 502.

    Raises:
        HTTPException: 404 if the session is absent or owned by another tenant
        HTTPException: 400 if the message is blank
        HTTPException: 502 if the conversational model fails
        HTTPException: 500 if the store fails
    """
    try:
        chat_session = await gate.authorize(tenant.id.value, request.session_id)
        bot_message = await engine.process_turn(chat_session, request.message)
    except SessionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except InvalidMessageError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except OracleError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Something went wrong processing the AI response",
        ) from e
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process message",
        ) from e

    return MessageResponse.from_domain(bot_message)


@router.get("/sessions")
async def list_sessions(
    tenant: Annotated[Tenant, Depends(get_current_tenant)],
    service: Annotated[SessionService, Depends(get_session_service)],
) -> list[SessionSummaryResponse]:
    """List the caller's sessions, newest first, each with its latest message."""
    try:
        summaries = await service.list_sessions(tenant.id.value)
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch sessions",
        ) from e

    return [SessionSummaryResponse.from_summary(summary) for summary in summaries]


@router.get("/{session_id}")
async def get_history(
    session_id: int,
    tenant: Annotated[Tenant, Depends(get_current_tenant)],
    gate: Annotated[SessionAccessGate, Depends(get_session_access_gate)],
    service: Annotated[SessionService, Depends(get_session_service)],
) -> list[MessageResponse]:
    """Return every message of a session, oldest first.

    Raises:
        HTTPException: 404 if the session is absent or owned by another tenant
        HTTPException: 500 if the store fails
    """
    try:
        chat_session = await gate.authorize(tenant.id.value, session_id)
        history = await service.history(chat_session)
    except SessionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch history",
        ) from e

    return [MessageResponse.from_domain(message) for message in history]
