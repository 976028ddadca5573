"""In-memory session store.

Entries live for the lifetime of the process. There is no eviction or expiry.
"""

import threading

from loguru import logger

from .base import SessionEntry, SessionStore


class InMemorySessionStore(SessionStore):
    """Dict-backed session store guarded by a lock (last write wins)."""

    def __init__(self):
        self._entries: dict[str, SessionEntry] = {}
        self._lock = threading.Lock()
        logger.debug("InMemorySessionStore initialized")

    def set(self, session_id: str, image_url: str) -> SessionEntry:
        entry = SessionEntry(session_id=session_id, image_url=image_url)
        with self._lock:
            self._entries[session_id] = entry
        logger.debug("Stored image for session {}: {}", session_id, image_url)
        return entry

    def get(self, session_id: str) -> str | None:
        entry = self.get_entry(session_id)
        return entry.image_url if entry else None

    def get_entry(self, session_id: str) -> SessionEntry | None:
        with self._lock:
            return self._entries.get(session_id)

    def count(self) -> int:
        with self._lock:
            return len(self._entries)
