"""Generation of input arrays for the sorting benchmark."""

from __future__ import annotations

import random
from collections.abc import Iterable

RAND_MAX = 2**31 - 1


def _sorted_prefix(size: int, amount_sorted: int) -> int:
    """Number of leading elements that are fixed, truncated toward zero."""
    return int(size * amount_sorted / 100)


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_int_array(
    size: int, amount_sorted: int, rng: random.Random | None = None
) -> list[int]:
    """Random integers in ``[0, RAND_MAX]``; the first ``amount_sorted`` percent are 0."""
    rng = _rng_or_default(rng)
    prefix = _sorted_prefix(size, amount_sorted)
    return [0 if i < prefix else rng.randint(0, RAND_MAX) for i in range(size)]


def random_float_array(
    size: int, amount_sorted: int, rng: random.Random | None = None
) -> list[float]:
    """Random floats in ``[0, 1]``; the first ``amount_sorted`` percent are -1.0."""
    rng = _rng_or_default(rng)
    prefix = _sorted_prefix(size, amount_sorted)
    return [-1.0 if i < prefix else rng.randint(0, RAND_MAX) / RAND_MAX for i in range(size)]


def monotonic_array(
    size: int, ascending: bool, rng: random.Random | None = None
) -> list[int]:
    """A run of consecutive integers from a random base, ascending or descending."""
    base = _rng_or_default(rng).randint(0, RAND_MAX)
    if ascending:
        return [base + i for i in range(size)]
    return [base + size - i for i in range(size)]


def _format_value(value: object) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_array(items: Iterable[object]) -> str:
    """Space-separated rendering of ``items``; floats use six significant digits."""
    return " ".join(_format_value(item) for item in items)