"""Reconstruction of nested values from flat mappings."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from .key_mapping import MISSING, PathCodec, fill_missing, merge
from .options import DEFAULT_OPTIONS, Options


if TYPE_CHECKING:
    from collections.abc import Mapping

    from .key_mapping import Segment


def build_path(segments: tuple[Segment, ...], value: Any) -> Any:
    """Wrap ``value`` in one container per segment, innermost first."""
    nested = value
    for segment in reversed(segments):
        if isinstance(segment, int):
            slots: list[Any] = [MISSING] * (segment + 1)
            slots[segment] = nested
            nested = slots
        else:
            nested = {segment: nested}
    return nested


def unflatten(flat: Mapping[str, Any], options: Options | None = None) -> Any:
    """Rebuild a nested value from a flat mapping produced by :func:`flatten`.

    Every key is parsed before anything is merged, so a malformed key raises
    without producing a partial result. Entries with longer paths are merged
    first; when a shorter path conflicts with a longer one it is applied last.

    >>> unflatten({"a.b": 1, "a.c": 2})
    {'a': {'b': 1, 'c': 2}}
    """
    options = options or DEFAULT_OPTIONS
    if not flat:
        return {}
    if list(flat) == [""]:
        return copy.deepcopy(flat[""])

    codec = PathCodec(options)
    entries = [(codec.split(key), value) for key, value in flat.items()]
    entries.sort(key=lambda entry: len(entry[0]), reverse=True)

    nested: Any = MISSING
    for segments, value in entries:
        nested = merge(nested, build_path(segments, copy.deepcopy(value)), options)
    return fill_missing(nested)
