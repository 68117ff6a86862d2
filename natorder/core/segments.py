"""Split strings into alternating text and number runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import cycle
from typing import Iterable, Iterator, Optional

from .utils import DIGIT_RUN, canonical_digits, ensure_text


class SegmentKind(Enum):
    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True)
class Segment:
    """A maximal run of digits (``NUMBER``) or non-digits (``TEXT``)."""

    kind: SegmentKind
    text: str

    @property
    def is_number(self) -> bool:
        return self.kind is SegmentKind.NUMBER

    @property
    def value(self) -> Optional[str]:
        """Canonical digit string of a number run, ``None`` for text.

        Kept as a string so runs of any length compare exactly; ``int()``
        refuses very long digit strings on recent interpreters.
        """
        if not self.is_number:
            return None
        return canonical_digits(self.text)

    def __str__(self) -> str:
        return self.text


def iter_segments(text: str) -> Iterator[Segment]:
    """
    Yield the segments of ``text`` from left to right.

    ``re.split`` with a capturing group alternates non-digit and digit
    pieces, starting with a (possibly empty) non-digit piece, so the kind of
    each piece follows from its position. Empty pieces only occur at the
    edges and are skipped.

    Example:
        >>> [str(s) for s in iter_segments("x12z034")]
        ['x', '12', 'z', '034']
    """
    return _iter_runs(ensure_text(text))


def _iter_runs(text: str) -> Iterator[Segment]:
    kinds = cycle((SegmentKind.TEXT, SegmentKind.NUMBER))
    for part, kind in zip(DIGIT_RUN.split(text), kinds):
        if part:
            yield Segment(kind, part)


def split_segments(text: str) -> tuple[Segment, ...]:
    """Return all segments of ``text`` as a tuple."""
    return tuple(iter_segments(text))


def join_segments(segments: Iterable[Segment]) -> str:
    """Reassemble the string a segment sequence was split from."""
    return "".join(segment.text for segment in segments)


__all__ = [
    "Segment",
    "SegmentKind",
    "iter_segments",
    "join_segments",
    "split_segments",
]
