"""Conversation presentation layer."""

from conversation.presentation.routes import router

__all__ = ["router"]
