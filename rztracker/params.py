"""Assemble the parameter set for one page-view beacon."""
from __future__ import annotations

from typing import Any

from rztracker.environment import get_current_title, get_current_url
from rztracker.identity import get_visitor_id, random_rand
from rztracker.models import TrackerOptions


def build_parameters(site_id: int, options: TrackerOptions, env) -> dict[str, Any]:
    """Build the ordered parameter mapping sent to the collector.

    Key order is idsite, rec, url, [action_name], _id, rand, apiv, [urlref].
    Optional keys are left out entirely when there is nothing to send.
    """
    params: dict[str, Any] = {}

    # Mandatory
    params["idsite"] = site_id
    params["rec"] = 1
    params["url"] = get_current_url(env)

    # Recommended
    action = get_current_title(env)
    if action is not None:
        params["action_name"] = action
    params["_id"] = get_visitor_id(getattr(env, "session_store", None))
    params["rand"] = random_rand()
    params["apiv"] = 1

    # Optional
    referrer = getattr(env, "referrer", None)
    if options.send_referrer and referrer:
        params["urlref"] = referrer

    return params
