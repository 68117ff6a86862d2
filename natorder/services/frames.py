"""Natural ordering for pandas ``Series`` and ``DataFrame`` columns."""

from __future__ import annotations

import logging
import math
from typing import Hashable

import pandas as pd

from natorder.core import Ordering, compare
from natorder.services.sorting import natural_key

logger = logging.getLogger(__name__)

__all__ = ["natural_rank", "natural_sort_frame", "natural_sort_series"]


def _is_missing(value: object) -> bool:
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _as_text(value: object) -> str:
    if isinstance(value, str):
        return value
    return str(value)


def natural_rank(values: pd.Series) -> pd.Series:
    """
    Return the dense natural-order rank of every value in ``values``.

    Values that compare equal share a rank, so a stable sort on the ranks
    keeps their original order in both directions. Missing values get
    ``NaN`` and therefore follow pandas' ``na_position`` rule. Non-string
    values are ranked by their ``str()`` form.
    """
    positions: list[int] = []
    texts: list[str] = []
    coerced = 0
    for position, value in enumerate(values.tolist()):
        if _is_missing(value):
            continue
        if not isinstance(value, str):
            coerced += 1
        positions.append(position)
        texts.append(_as_text(value))
    if coerced:
        logger.debug("Converted %d non-string value(s) to text for natural ranking.", coerced)

    ranks = [math.nan] * len(values)
    order = sorted(range(len(texts)), key=lambda idx: natural_key(texts[idx]))
    rank = 0
    previous: str | None = None
    for idx in order:
        current = texts[idx]
        if previous is not None and compare(previous, current) is not Ordering.EQUAL:
            rank += 1
        ranks[positions[idx]] = float(rank)
        previous = current
    return pd.Series(ranks, index=values.index, dtype="float64")


def natural_sort_series(series: pd.Series, *, ascending: bool = True) -> pd.Series:
    """Return ``series`` ordered naturally by value; missing values go last."""
    logger.debug("Natural sort of series %r with %d value(s).", series.name, len(series))
    return series.sort_values(
        ascending=ascending,
        kind="stable",
        na_position="last",
        key=natural_rank,
    )


def natural_sort_frame(
    frame: pd.DataFrame,
    column: Hashable,
    *,
    ascending: bool = True,
) -> pd.DataFrame:
    """
    Return ``frame`` with its rows ordered naturally by ``column``.

    Parameters
    ----------
    frame:
        Table to reorder. It is not modified.
    column:
        Label of the column holding the strings to sort by. An unknown label
        raises ``KeyError``.
    ascending:
        ``False`` sorts in descending natural order. Missing values are
        placed last either way.
    """
    if column not in frame.columns:
        raise KeyError(column)
    logger.debug("Natural sort of %d row(s) by column %r.", len(frame), column)
    return frame.sort_values(
        by=column,
        ascending=ascending,
        kind="stable",
        na_position="last",
        key=natural_rank,
    )
