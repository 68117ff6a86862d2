"""Sorting helpers built on the natural comparator."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, MutableSequence, Optional, TypeVar

from natorder.core import compare

__all__ = ["natural_key", "natural_sort", "natural_sorted"]

T = TypeVar("T")

# sorted(names, key=natural_key)
natural_key = cmp_to_key(compare)


def natural_sort(values: MutableSequence[str], *, reverse: bool = False) -> None:
    """
    Sort ``values`` in place in natural order.

    The sort is stable: strings that compare equal (``"a007"`` and ``"a7"``)
    keep their relative order.

    Example:
        >>> names = ["z10", "z9", "z1"]
        >>> natural_sort(names)
        >>> names
        ['z1', 'z9', 'z10']
    """
    if isinstance(values, list):
        values.sort(key=natural_key, reverse=reverse)
        return
    ordered = sorted(values, key=natural_key, reverse=reverse)
    for index, value in enumerate(ordered):
        values[index] = value


def natural_sorted(
    values: Iterable[T],
    *,
    key: Optional[Callable[[T], str]] = None,
    reverse: bool = False,
) -> list[T]:
    """
    Return a new list with ``values`` in natural order.

    Parameters
    ----------
    values:
        Items to sort. They must be strings unless ``key`` is given.
    key:
        Optional projection from an item to the string it is sorted by.
    reverse:
        Sort in descending natural order.
    """
    if key is None:
        return sorted(values, key=natural_key, reverse=reverse)
    return sorted(values, key=lambda item: natural_key(key(item)), reverse=reverse)
