"""Utility functions shared by the natorder core."""

from __future__ import annotations

import re

# ASCII only: ``\d`` would also match full-width and other Unicode digits.
DIGIT_RUN = re.compile(r"([0-9]+)")


class NaturalOrderTypeError(TypeError):
    """Raised when a value that is not a ``str`` reaches the comparator."""


def ensure_text(value: object) -> str:
    """Return ``value`` unchanged when it is a ``str``, raise otherwise."""
    if isinstance(value, str):
        return value
    raise NaturalOrderTypeError(
        f"natural ordering needs str values, got {type(value).__name__}: {value!r}"
    )


def canonical_digits(digits: str) -> str:
    """Strip leading zeros from a digit run, keeping a single ``"0"``."""
    stripped = digits.lstrip("0")
    return stripped or "0"


__all__ = ["DIGIT_RUN", "NaturalOrderTypeError", "canonical_digits", "ensure_text"]
