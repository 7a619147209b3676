"""Infrastructure adapters for the conversation bounded context."""
