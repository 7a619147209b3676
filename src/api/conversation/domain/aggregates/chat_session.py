"""ChatSession aggregate for the conversation context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ChatSession:
    """A single conversation thread owned by one tenant.

    Business rules:
    - The owning tenant never changes
    - The title starts empty and is assigned at most once, on the first
      user turn; once set it is never overwritten
    - Sessions are never deleted
    """

    id: int
    tenant_id: str
    created_at: datetime
    title: str | None = None

    @property
    def is_titled(self) -> bool:
        """Whether a title has been assigned."""
        return self.title is not None

    def assign_title(self, title: str) -> None:
        """Assign the session title.

        Args:
            title: The derived title

        Raises:
            TitleAlreadyAssignedError: If the session already has a title
        """
        from conversation.ports.exceptions import TitleAlreadyAssignedError

        if self.title is not None:
            raise TitleAlreadyAssignedError(
                f"Session {self.id} is already titled {self.title!r}"
            )

        self.title = title
