"""Page bootstrap: run track() once from a configuration value."""
from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from typing import Any, Callable, Optional

from rztracker.errors import ConfigError
from rztracker.models import TrackingConfig
from rztracker.tracker import track

logger = logging.getLogger(__name__)


def bootstrap(
    config: Any,
    *,
    env: Any = None,
    sender: Optional[Callable[[str], None]] = None,
) -> None:
    """Call track() with the id, host and options from `config`.

    Does nothing when no configuration is given. Any other value is handed to
    track(), which reports a missing id or host.
    """
    if config is None:
        logger.debug("No tracker configuration, nothing to do")
        return
    if isinstance(config, Mapping):
        config = TrackingConfig.from_dict(config)
    track(
        getattr(config, "id", None),
        getattr(config, "host", None),
        getattr(config, "options", None),
        env=env,
        sender=sender,
    )


def load_config(path: str) -> TrackingConfig:
    """Load a `{id, host, options}` configuration from a JSON file."""
    if not os.path.exists(path):
        raise ConfigError(path, "file not found")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError(path, "expected a JSON object")
    return TrackingConfig.from_dict(data)
