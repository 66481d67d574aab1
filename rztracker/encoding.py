"""Collector URL and query string encoding."""
from __future__ import annotations

from typing import Any
from urllib.parse import quote, unquote

from rztracker.models import COLLECTOR_PATH, TrackerOptions

# Characters a browser's URI component encoder leaves alone, on top of
# quote()'s letters, digits and "_.-~"
_COMPONENT_SAFE = "!*'()"


def build_url(host: str, options: TrackerOptions) -> str:
    """Collector endpoint for `host`. The host is not validated."""
    prefix = ("https" if options.use_https else "http") + "://"
    return prefix + host + COLLECTOR_PATH


def encode_component(value: Any) -> str:
    """Percent-encode one query value."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif value is None:
        text = ""
    else:
        text = str(value)
    return quote(text, safe=_COMPONENT_SAFE)


def build_query_string(params: dict[str, Any]) -> str:
    """Serialise params in order as `?k=v&k=v`. Empty params give "?"."""
    pairs = [f"{key}={encode_component(value)}" for key, value in params.items()]
    return "?" + "&".join(pairs)


def parse_query_string(query: str) -> dict[str, str]:
    """Decode a query string produced by build_query_string, keeping order."""
    if query.startswith("?"):
        query = query[1:]
    result: dict[str, str] = {}
    if not query:
        return result
    for pair in query.split("&"):
        key, _, value = pair.partition("=")
        result[unquote(key)] = unquote(value)
    return result
