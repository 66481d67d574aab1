from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Collector endpoint path, appended to the host
COLLECTOR_PATH = "/track"

# Session-store key for the visitor id
VISITOR_ID_KEY = "rz-tracker-ID"

# Upper bound for random identifiers and the cache-buster (2^32 - 1)
MAX_INT32 = 4294967295


@dataclass(frozen=True)
class TrackerOptions:
    """Resolved options for a single track() call.

    - use_https: send the beacon over https instead of http
    - send_referrer: include the document referrer as `urlref`
    - strict_do_not_track: only track when the visitor explicitly opted in,
      i.e. an absent do-not-track signal suppresses tracking
    """
    use_https: bool = True
    send_referrer: bool = True
    strict_do_not_track: bool = False


# Recognised caller keys -> TrackerOptions field. Both the camelCase keys
# used by embedded page configs and the field names are accepted.
OPTION_KEYS = {
    "useHttps": "use_https",
    "sendReferrer": "send_referrer",
    "strictDoNotTrack": "strict_do_not_track",
    "use_https": "use_https",
    "send_referrer": "send_referrer",
    "strict_do_not_track": "strict_do_not_track",
}


@dataclass
class TrackingConfig:
    """The bootstrap value a page hands over: `{id, host, options}`."""
    id: Any = None
    host: str = ""
    options: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "TrackingConfig":
        options = data.get("options")
        return cls(
            id=data.get("id"),
            host=data.get("host", ""),
            options=dict(options) if isinstance(options, dict) else {},
        )
