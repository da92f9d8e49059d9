"""Benchmark configuration: one integer setting per non-comment line."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from enum import IntEnum
from os import PathLike


class Mode(IntEnum):
    """What the program does with the configuration."""

    TEST = 0
    SIMULATION = 1


class DataType(IntEnum):
    """Element type of the generated arrays."""

    INT = 0
    FLOAT = 1


class Direction(IntEnum):
    """Shape of the generated arrays."""

    RANDOM = 0
    ASCENDING = 1
    DESCENDING = 2


@dataclass(frozen=True)
class Config:
    """Settings read from a configuration file, in file order.

    Values are kept as read; they are checked when a run uses them.
    """

    mode: int
    size: int
    algorithm: int
    amount_sorted: int
    data_type: int
    instance_amount: int
    direction: int


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_config(text: str) -> Config:
    """Build a :class:`Config` from the text of a configuration file.

    Empty lines and lines starting with ``#`` are skipped, as are lines that
    do not start with an integer. Trailing text after the integer is ignored.
    Values beyond the seventh are ignored.
    """
    values = []
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        match = _LEADING_INT.match(line)
        if match:
            values.append(int(match.group(1)))

    expected = len(fields(Config))
    if len(values) < expected:
        raise ValueError(f"configuration needs {expected} values, found {len(values)}")
    return Config(*values[:expected])


def load_config(path: str | PathLike[str]) -> Config:
    """Read and parse the configuration file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_config(handle.read())