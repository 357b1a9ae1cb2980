"""kv-flat - flatten nested dicts and lists into delimited keys and back"""

from ._version import version as __version__
from .decoder import unflatten
from .encoder import flatten
from .errors import ConfigError, FlatError, MalformedIndexError
from .key_mapping import PathCodec
from .options import ArrayDelimiter, Options


__all__ = [
    "ArrayDelimiter",
    "ConfigError",
    "FlatError",
    "MalformedIndexError",
    "Options",
    "PathCodec",
    "__version__",
    "flatten",
    "unflatten",
]
