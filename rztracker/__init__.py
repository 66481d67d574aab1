"""rztracker - page-view beacons for a remote tracking collector."""

__version__ = "0.2.0"

from rztracker.boot import bootstrap  # noqa: E402
from rztracker.tracker import track  # noqa: E402

__all__ = ["__version__", "bootstrap", "track"]
