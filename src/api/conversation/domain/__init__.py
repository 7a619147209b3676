"""Conversation domain layer - aggregates, value objects and transcripts."""
