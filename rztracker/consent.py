"""Do-not-track evaluation."""
from __future__ import annotations

from typing import Optional

from rztracker.models import TrackerOptions

_DNT_ON = ("yes", "1")
_DNT_OFF = ("no", "0")


def get_do_not_track(env) -> Optional[bool]:
    """Find the visitor's do-not-track flag.

    Returns True if the flag is on, False if it is explicitly off, and None
    when no flag is set or its value is not recognised. The primary source
    wins; the legacy one is only read when the primary is absent.
    """
    value = getattr(env, "do_not_track", None)
    if value is None:
        value = getattr(env, "ms_do_not_track", None)
    if not value:
        return None
    if value in _DNT_ON:
        return True
    if value in _DNT_OFF:
        return False
    return None


def is_suppressed(signal: Optional[bool], options: TrackerOptions) -> bool:
    """Whether the page view must not be tracked.

    do-not-track on always suppresses. An unknown preference suppresses only
    in strict mode; lenient mode tracks.
    """
    if signal is True:
        return True
    return signal is None and options.strict_do_not_track
