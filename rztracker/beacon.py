"""One-way beacon dispatch. GET only, the response is never parsed.

Delivery is best-effort: the request runs on a daemon thread that nobody
joins, and a failed request is logged at DEBUG and dropped.
"""
from __future__ import annotations

import logging
import threading
import urllib.error
import urllib.request

from rztracker import __version__

logger = logging.getLogger(__name__)

BEACON_TIMEOUT_SECONDS = 5
USER_AGENT = f"rztracker/{__version__}"


def send_request(url: str) -> None:
    """Fire a GET to `url` without waiting for it."""
    thread = threading.Thread(
        target=deliver,
        args=(url,),
        name="rztracker-beacon",
        daemon=True,
    )
    thread.start()


def deliver(url: str) -> None:
    """Perform the GET on the calling thread. Never raises."""
    try:
        req = urllib.request.Request(
            url,
            headers={"User-Agent": USER_AGENT},
            method="GET",
        )
        with urllib.request.urlopen(req, timeout=BEACON_TIMEOUT_SECONDS) as resp:
            logger.debug("Beacon GET %s: HTTP %d", url, resp.status)
    except (urllib.error.URLError, OSError, ValueError) as e:
        logger.debug("Beacon GET %s failed: %s", url, e)
