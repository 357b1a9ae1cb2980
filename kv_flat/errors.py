"""Exceptions raised by flatten and unflatten."""

from __future__ import annotations


class FlatError(ValueError):
    """Base class for all kv-flat errors."""


class ConfigError(FlatError):
    """Raised when ``Options`` holds an unusable setting."""


class MalformedIndexError(FlatError):
    """Raised when a bracketed path segment is not a non-negative integer."""

    def __init__(self, key: str, segment: str) -> None:
        msg = f"malformed array index segment {segment!r} in key {key!r}"
        super().__init__(msg)
        self.key = key
        self.segment = segment
