"""Core helpers for natorder."""

from .compare import Ordering, compare, compare_segments
from .segments import (
    Segment,
    SegmentKind,
    iter_segments,
    join_segments,
    split_segments,
)
from .utils import NaturalOrderTypeError

__all__ = [
    "NaturalOrderTypeError",
    "Ordering",
    "Segment",
    "SegmentKind",
    "compare",
    "compare_segments",
    "iter_segments",
    "join_segments",
    "split_segments",
]
