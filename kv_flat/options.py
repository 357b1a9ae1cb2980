"""Options shared by flatten and unflatten."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ConfigError


class ArrayDelimiter(Enum):
    """Bracket pair wrapped around array-index path segments."""

    NONE = ("", "")
    PARENS = ("(", ")")
    BRACKETS = ("[", "]")
    CURLY_BRACES = ("{", "}")

    @property
    def opening(self) -> str:
        return self.value[0]

    @property
    def closing(self) -> str:
        return self.value[1]

    @classmethod
    def parse(cls, value: ArrayDelimiter | str | None) -> ArrayDelimiter:
        """Resolve an enum member, its name, ``""`` or ``None``."""
        if isinstance(value, cls):
            return value
        if value is None or value == "":
            return cls.NONE
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        msg = f"array delimiter not supported: {value!r}"
        raise ConfigError(msg)


@dataclass(frozen=True)
class Options:
    """Flatten/unflatten configuration.

    Parameters
    ----------
    delimiter
        String inserted between path segments.
    safe
        Keep sequences whole instead of expanding them into indexed keys.
    max_depth
        Container depth at which flattening stops; ``0`` means unlimited.
    array_delimiter
        Bracket pair wrapped around index segments. Accepts an
        :class:`ArrayDelimiter`, its name, ``""`` or ``None``.
    slice_deep_merge
        Merge sequences element-wise while unflattening instead of replacing.
    overwrite_nil_in_maps
        Let ``None`` replace an already merged value while unflattening.
    """

    delimiter: str = "."
    safe: bool = False
    max_depth: int = 0
    array_delimiter: ArrayDelimiter | str | None = ArrayDelimiter.NONE
    slice_deep_merge: bool = False
    overwrite_nil_in_maps: bool = False

    def __post_init__(self) -> None:
        array_delimiter = ArrayDelimiter.parse(self.array_delimiter)
        object.__setattr__(self, "array_delimiter", array_delimiter)

        if not self.delimiter:
            msg = "delimiter must not be empty"
            raise ConfigError(msg)
        if self.max_depth < 0:
            msg = "max_depth must not be negative"
            raise ConfigError(msg)
        if array_delimiter is not ArrayDelimiter.NONE and any(
            bracket in self.delimiter for bracket in array_delimiter.value
        ):
            msg = "delimiter must not contain array delimiter brackets"
            raise ConfigError(msg)

    def with_(self, **changes: Any) -> Options:
        """Return a copy with ``changes`` applied and validated."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = Options()
