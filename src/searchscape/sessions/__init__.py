"""
Session store package.

Provides a factory function to create the configured session store.
"""

from .base import SessionEntry, SessionStore
from .memory import InMemorySessionStore


def create_session_store(store_type: str = "memory") -> SessionStore:
    """
    Factory function to create a session store.

    Args:
        store_type: Type of store (only "memory" is supported)

    Returns:
        Configured SessionStore instance

    Raises:
        ValueError: If store_type is not recognized
    """
    if store_type == "memory":
        return InMemorySessionStore()
    else:
        raise ValueError(f"Unknown session store type: {store_type}")


__all__ = [
    "SessionEntry",
    "SessionStore",
    "InMemorySessionStore",
    "create_session_store",
]
