"""Flattening of nested values into single-level mappings."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from .key_mapping import PathCodec, is_sequence
from .options import DEFAULT_OPTIONS, Options


def _flatten(
    flat: dict[str, Any],
    prefix: str,
    depth: int,
    value: Any,
    codec: PathCodec,
    options: Options,
) -> dict[str, Any]:
    limited = options.max_depth != 0 and depth >= options.max_depth

    if isinstance(value, Mapping):
        if limited or not value:
            flat[prefix] = copy.deepcopy(value)
            return flat
        for key, item in value.items():
            flat = _flatten(flat, codec.join_key(prefix, str(key)), depth + 1, item, codec, options)
        return flat

    if is_sequence(value):
        if limited or options.safe or not value:
            flat[prefix] = copy.deepcopy(value)
            return flat
        for index, item in enumerate(value):
            flat = _flatten(flat, codec.join_index(prefix, index), depth + 1, item, codec, options)
        return flat

    flat[prefix] = value
    return flat


def flatten(value: Any, options: Options | None = None) -> dict[str, Any]:
    """Flatten ``value`` into a one-level mapping of encoded paths.

    Empty mappings and sequences are kept as values. Containers beyond
    ``options.max_depth``, and sequences when ``options.safe`` is set, are
    stored whole. A scalar at the root is stored under the empty key.

    >>> flatten({"a": {"b": 1}, "c": ["x", "y"]})
    {'a.b': 1, 'c.0': 'x', 'c.1': 'y'}
    """
    options = options or DEFAULT_OPTIONS
    return _flatten({}, "", 0, value, PathCodec(options), options)
