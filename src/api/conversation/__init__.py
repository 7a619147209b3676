"""Conversation bounded context.

Owns chat sessions, their append-only message history, and the replay of
that history to the conversational model to produce each bot turn.
"""
