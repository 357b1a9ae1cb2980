"""Merge policy used when reconstructing nested values from flat entries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final


if TYPE_CHECKING:
    from kv_flat.options import Options


class _Missing:
    """Placeholder for list slots no flat entry has filled yet."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def is_sequence(value: Any) -> bool:
    return isinstance(value, list | tuple)


def _merge_mappings(existing: Mapping[str, Any], incoming: Mapping[str, Any], options: Options) -> dict[str, Any]:
    merged = dict(existing)
    for key, value in incoming.items():
        merged[key] = merge(merged[key], value, options) if key in merged else value
    return merged


def _merge_sequences(existing: list[Any], incoming: list[Any], options: Options) -> list[Any]:
    merged = list(existing)
    for index, value in enumerate(incoming):
        if index < len(merged):
            merged[index] = merge(merged[index], value, options)
        else:
            merged.append(value)
    return merged


def merge(existing: Any, incoming: Any, options: Options) -> Any:
    """Combine ``incoming`` into ``existing`` and return the result.

    Mappings merge key by key. Sequences merge index by index when
    ``options.slice_deep_merge`` is set and are otherwise replaced. Any other
    combination is replaced by ``incoming``, except that ``None`` only replaces
    a value when ``options.overwrite_nil_in_maps`` is set. Unfilled list slots
    never replace anything.
    """
    if existing is MISSING:
        return incoming
    if incoming is MISSING:
        return existing
    if isinstance(existing, Mapping) and isinstance(incoming, Mapping):
        return _merge_mappings(existing, incoming, options)
    if is_sequence(existing) and is_sequence(incoming):
        if options.slice_deep_merge:
            return _merge_sequences(list(existing), list(incoming), options)
        return incoming
    if incoming is None and not options.overwrite_nil_in_maps:
        return existing
    return incoming


def fill_missing(value: Any) -> Any:
    """Replace remaining placeholders with ``None``."""
    if value is MISSING:
        return None
    if isinstance(value, dict):
        return {key: fill_missing(item) for key, item in value.items()}
    if isinstance(value, list):
        return [fill_missing(item) for item in value]
    return value
