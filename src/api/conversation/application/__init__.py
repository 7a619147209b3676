"""Application layer for the conversation bounded context."""
