"""Exceptions raised outside the track() path."""
from __future__ import annotations


class RztrackerError(Exception):
    """Base class for rztracker errors."""


class ConfigError(RztrackerError):
    """A bootstrap configuration file could not be read or understood."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
