"""Encoding of nested paths into flat keys and back."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from kv_flat.errors import MalformedIndexError
from kv_flat.options import ArrayDelimiter, Options


if TYPE_CHECKING:
    from collections.abc import Iterable


Segment: TypeAlias = str | int


class PathCodec:
    """Map between flat keys and path segments for one set of options."""

    def __init__(self, options: Options) -> None:
        super().__init__()
        self.sep = options.delimiter
        array_delimiter = ArrayDelimiter.parse(options.array_delimiter)
        self.bracketed = array_delimiter is not ArrayDelimiter.NONE
        self.opening = array_delimiter.opening
        self.closing = array_delimiter.closing

    def join_key(self, prefix: str, key: str) -> str:
        """Append a mapping key to ``prefix``."""
        if not prefix:
            return key
        return f"{prefix}{self.sep}{key}"

    def join_index(self, prefix: str, index: int) -> str:
        """Append an array index to ``prefix``."""
        if not self.bracketed:
            return self.join_key(prefix, str(index))
        return f"{prefix}{self.opening}{index}{self.closing}"

    def encode(self, segments: Iterable[Segment]) -> str:
        """Build a flat key from path segments."""
        key = ""
        for segment in segments:
            if isinstance(segment, int):
                key = self.join_index(key, segment)
            else:
                key = self.join_key(key, segment)
        return key

    def split(self, flat_key: str) -> tuple[Segment, ...]:
        """Convert a flat key into path segments.

        Index segments are only recognised when an array delimiter is
        configured; otherwise every segment is a mapping key.
        """
        if not self.bracketed:
            return tuple(flat_key.split(self.sep))

        normalized = flat_key.replace(self.opening, self.sep + self.opening)
        return tuple(self._parse_segment(flat_key, raw) for raw in normalized.split(self.sep))

    def _parse_segment(self, flat_key: str, raw: str) -> Segment:
        if not raw.startswith(self.opening):
            return raw
        digits = raw.removeprefix(self.opening).removesuffix(self.closing)
        if not raw.endswith(self.closing) or not digits.isascii() or not digits.isdigit():
            raise MalformedIndexError(flat_key, raw)
        return int(digits)
