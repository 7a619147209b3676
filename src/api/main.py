"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from conversation.presentation import router as chat_router
from iam.presentation import router as keys_router
from infrastructure.database.dependencies import (
    check_database_connection,
    close_database_connections,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import get_oracle_settings, get_settings
from infrastructure.version import __version__
from shared_kernel.middleware import request_context_middleware

settings = get_settings()


@asynccontextmanager
async def colloquy_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Startup checks (refuses to start without a model API key)
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    configure_logging(debug=settings.debug)
    probe = DefaultStartupProbe()

    oracle_settings = get_oracle_settings()
    if not oracle_settings.api_key.get_secret_value():
        probe.oracle_api_key_missing()
        raise RuntimeError("Missing GEMINI_API_KEY; set it or COLLOQUY_ORACLE_API_KEY")
    probe.application_started(version=__version__, model=oracle_settings.model)

    yield

    await close_database_connections()
    probe.application_stopped()


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant conversational chat backend",
    version=__version__,
    lifespan=colloquy_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(request_context_middleware)

# Include IAM bounded context routes
app.include_router(keys_router)

# Include Conversation bounded context routes
app.include_router(chat_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
async def health_db() -> JSONResponse:
    """Check database connection health."""
    connected = await check_database_connection()
    return JSONResponse(
        status_code=status.HTTP_200_OK if connected else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ok" if connected else "unhealthy",
            "connected": connected,
        },
    )
