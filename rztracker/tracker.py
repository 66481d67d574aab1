"""The public track() operation."""
from __future__ import annotations

import logging
import numbers
from typing import Any, Callable, Optional

from rztracker.beacon import send_request
from rztracker.consent import get_do_not_track, is_suppressed
from rztracker.encoding import build_query_string, build_url
from rztracker.environment import get_default_environment
from rztracker.options import create_options
from rztracker.params import build_parameters

logger = logging.getLogger(__name__)


def _is_valid_site_id(site_id: Any) -> bool:
    """A site id must be a positive whole number, not a numeric string."""
    if isinstance(site_id, bool) or not site_id:
        return False
    if isinstance(site_id, float):
        return site_id.is_integer() and site_id > 0
    return isinstance(site_id, numbers.Integral) and site_id > 0


def track(
    site_id: Any,
    host: Any,
    options: Any = None,
    *,
    env: Any = None,
    sender: Optional[Callable[[str], None]] = None,
) -> None:
    """Send a page-view beacon for the current page to `host`.

    Args:
        site_id: id of the site the visit is recorded for
        host: hostname of the collector receiving the beacon
        options: partial options mapping (useHttps, sendReferrer,
            strictDoNotTrack); missing keys use the defaults
        env: page environment; defaults to the process-wide one
        sender: replaces the network dispatch, receives the full URL

    Never raises. Bad input is logged at ERROR, a do-not-track visitor is
    skipped silently.
    """
    try:
        if not _is_valid_site_id(site_id):
            logger.error("rztracker: idsite passed to the track function was not a valid number.")
            return
        if not host:
            logger.error("rztracker: no host was passed to the track function.")
            return

        resolved = create_options(options)
        page = env if env is not None else get_default_environment()

        if is_suppressed(get_do_not_track(page), resolved):
            logger.debug("Do-not-track in effect, page view not tracked")
            return

        params = build_parameters(int(site_id), resolved, page)
        url = build_url(str(host), resolved) + build_query_string(params)

        (sender or send_request)(url)
    except Exception as e:
        logger.warning("rztracker: tracking failed: %s", e)
