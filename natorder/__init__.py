"""natorder package root."""

from .core import (
    NaturalOrderTypeError,
    Ordering,
    Segment,
    SegmentKind,
    compare,
    compare_segments,
    iter_segments,
    join_segments,
    split_segments,
)
from .services.sorting import natural_key, natural_sort, natural_sorted

APP_NAME = "natorder"
__version__ = "0.1.0"

__all__ = [
	"NaturalOrderTypeError",
	"Ordering",
	"Segment",
	"SegmentKind",
	"compare",
	"compare_segments",
	"iter_segments",
	"join_segments",
	"natural_key",
	"natural_sort",
	"natural_sorted",
	"split_segments",
	"APP_NAME",
	"__version__",
]
