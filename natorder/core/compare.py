"""Three-way natural comparison of strings."""

from __future__ import annotations

from enum import IntEnum
from itertools import zip_longest

from .segments import Segment, iter_segments


class Ordering(IntEnum):
    """Result of a three-way comparison; works with ``functools.cmp_to_key``."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


def _order(left, right) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_segments(left: Segment, right: Segment) -> Ordering:
    """
    Compare two segments found at the same position.

    Two numbers compare by value: leading zeros are ignored, then the longer
    run is the larger one, and equal lengths compare digit by digit. Any
    other pair compares its raw text.
    """
    if left.is_number and right.is_number:
        left_digits = left.value
        right_digits = right.value
        return _order((len(left_digits), left_digits), (len(right_digits), right_digits))
    return _order(left.text, right.text)


def compare(a: str, b: str) -> Ordering:
    """
    Compare ``a`` and ``b`` in natural order.

    Segments are compared pairwise and the first difference decides. When
    one string runs out of segments first it sorts before the other.

    Example:
        >>> compare("z9", "z10")
        <Ordering.LESS: -1>
        >>> compare("a007b", "a7b")
        <Ordering.EQUAL: 0>
    """
    for left, right in zip_longest(iter_segments(a), iter_segments(b)):
        if left is None:
            return Ordering.LESS
        if right is None:
            return Ordering.GREATER
        result = compare_segments(left, right)
        if result is not Ordering.EQUAL:
            return result
    return Ordering.EQUAL


__all__ = ["Ordering", "compare", "compare_segments"]
