"""Read-only view of the page being tracked.

The tracker never touches ambient globals. Everything it needs to know about
the page (address, title, referrer, the visitor's do-not-track preference,
and where the session visitor id lives) comes through an Environment.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from bs4 import BeautifulSoup

from rztracker.identity import MemorySessionStore, SessionStore

logger = logging.getLogger(__name__)


class Environment(Protocol):
    do_not_track: Optional[str]
    ms_do_not_track: Optional[str]
    location: Any
    title: Optional[str]
    referrer: Optional[str]
    session_store: Optional[SessionStore]


@dataclass(frozen=True)
class StaticEnvironment:
    """Fixed page context, for tests and the command line."""
    location: Any = ""
    title: Optional[str] = None
    referrer: Optional[str] = None
    do_not_track: Optional[str] = None
    ms_do_not_track: Optional[str] = None
    session_store: Optional[SessionStore] = None


class HtmlPageEnvironment:
    """Page context taken from a rendered HTML document and its request.

    The consent signal comes from the `DNT` request header, falling back to
    the older `X-Do-Not-Track` header.
    """

    def __init__(
        self,
        url: Any,
        html: str = "",
        referrer: Optional[str] = None,
        headers: Optional[dict] = None,
        session_store: Optional[SessionStore] = None,
    ):
        self.location = url
        self.referrer = referrer
        self.session_store = session_store
        self._headers = {k.lower(): v for k, v in (headers or {}).items()}
        self._soup = BeautifulSoup(html or "", "html.parser")

    @property
    def do_not_track(self) -> Optional[str]:
        return self._headers.get("dnt")

    @property
    def ms_do_not_track(self) -> Optional[str]:
        return self._headers.get("x-do-not-track")

    @property
    def title(self) -> Optional[str]:
        tag = self._soup.find("title")
        if tag is None:
            return None
        return tag.get_text()


def get_current_url(env: Environment) -> Any:
    """The full address of the current page (URL-like; str() is used)."""
    return env.location


def get_current_title(env: Environment) -> Optional[str]:
    """Text of the first title element, or None when the page has none."""
    return env.title


_default_environment: Any = None
_default_lock = threading.Lock()


def get_default_environment() -> Any:
    """Process-wide environment with a shared in-memory session store.

    Until set_default_environment() binds a real page, the default has no
    address, title or referrer, so beacons carry an empty `url`.
    """
    global _default_environment
    with _default_lock:
        if _default_environment is None:
            logger.debug("No page environment bound, using an empty default")
            _default_environment = StaticEnvironment(session_store=MemorySessionStore())
        return _default_environment


def set_default_environment(env: Any) -> None:
    """Bind the environment used when track() is called without one."""
    global _default_environment
    with _default_lock:
        _default_environment = env
