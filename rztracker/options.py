"""Merge caller options over the defaults."""
from __future__ import annotations

import logging
from collections.abc import Mapping

from rztracker.models import OPTION_KEYS, TrackerOptions

logger = logging.getLogger(__name__)


def create_options(user_options=None) -> TrackerOptions:
    """Build a full TrackerOptions from a (possibly partial) mapping.

    Recognised keys take the caller's value, everything else falls back to
    the defaults. Unknown keys are dropped.
    """
    if isinstance(user_options, TrackerOptions):
        return user_options
    if not isinstance(user_options, Mapping):
        if user_options is not None:
            logger.debug("Ignoring tracker options of type %s", type(user_options).__name__)
        return TrackerOptions()

    resolved: dict[str, bool] = {}
    for key, value in user_options.items():
        name = OPTION_KEYS.get(key)
        if name is None:
            logger.debug("Ignoring unknown tracker option %r", key)
            continue
        resolved[name] = value
    return TrackerOptions(**resolved)
