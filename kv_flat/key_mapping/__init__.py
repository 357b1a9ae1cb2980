"""Path encoding and merge utilities."""

from .codec import PathCodec, Segment
from .merge import MISSING, fill_missing, is_sequence, merge


__all__ = ["MISSING", "PathCodec", "Segment", "fill_missing", "is_sequence", "merge"]
