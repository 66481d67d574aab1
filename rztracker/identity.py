"""Visitor identity: random hex ids and the per-session visitor id.

The generator is best-effort randomness from the `random` module. It is
fine for de-duplicating page views and must not be used for anything
security-sensitive.
"""
from __future__ import annotations

import logging
import random
import threading
from typing import Optional, Protocol

from rztracker.models import MAX_INT32, VISITOR_ID_KEY

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Key/value store whose entries live for one browsing session."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemorySessionStore:
    """Dict-backed session store. Last write wins; reads are idempotent."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = value

    def clear(self) -> None:
        """End the session."""
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


def random_rand() -> int:
    """Random integer in [1, 2^32 - 1]."""
    return random.randint(1, MAX_INT32)


def _pad8(value: int) -> str:
    return format(value, "x").rjust(8, "0")


def random_hex() -> str:
    """Return 32 lowercase hex digits built from four random 32-bit blocks."""
    return "".join(_pad8(random_rand()) for _ in range(4))


def get_visitor_id(store: SessionStore | None = None) -> str:
    """Get the id that identifies this visitor for the current session.

    With a session store the id is created once and then reused. Without one
    every call returns a fresh id, so each page view counts as a new visitor.
    """
    if store is None:
        return random_hex()

    visitor_id = store.get_item(VISITOR_ID_KEY)
    if visitor_id is None:
        visitor_id = random_hex()
        store.set_item(VISITOR_ID_KEY, visitor_id)
        logger.debug("New visitor id stored under %s", VISITOR_ID_KEY)
    return visitor_id
