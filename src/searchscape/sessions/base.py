"""Abstract base class and data model for session stores.

A session store remembers the last image fetched for each user so a later
transform can find it without the caller resending the URL.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime

from pydantic import BaseModel, Field


class SessionEntry(BaseModel):
    """The most recently fetched image for a session."""

    session_id: str = Field(description="Caller-supplied user/session identifier")
    image_url: str = Field(description="URL of the last successfully fetched image")
    fetched_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the image was fetched",
    )


class SessionStore(ABC):
    """Abstract interface for session-to-image storage."""

    @abstractmethod
    def set(self, session_id: str, image_url: str) -> SessionEntry:
        """Store an image URL for a session, replacing any previous entry.

        Args:
            session_id: Session identifier
            image_url: Image URL to remember

        Returns:
            The stored entry

        """
        pass

    @abstractmethod
    def get(self, session_id: str) -> str | None:
        """Return the stored image URL for a session, or None if absent."""
        pass

    @abstractmethod
    def get_entry(self, session_id: str) -> SessionEntry | None:
        """Return the full stored entry for a session, or None if absent."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of sessions with a stored image."""
        pass
