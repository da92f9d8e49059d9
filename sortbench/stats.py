"""Summary statistics over measured sort times and their CSV export."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike


@dataclass(frozen=True)
class Results:
    """Timings of every instance with their summary statistics, in seconds."""

    avg_time: float
    min_time: float
    max_time: float
    median_time: float
    std_dev_time: float
    instance_times: tuple[float, ...]


def compute_results(times: Iterable[float]) -> Results:
    """Summarise ``times``: mean, extremes, median and population standard deviation."""
    instance_times = tuple(times)
    if not instance_times:
        raise ValueError("no timings to summarise")

    count = len(instance_times)
    average = sum(instance_times) / count

    ordered = sorted(instance_times)
    middle = count // 2
    if count % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) / 2
    else:
        median = ordered[middle]

    variance = sum((t - average) ** 2 for t in instance_times) / count
    return Results(
        avg_time=average,
        min_time=min(instance_times),
        max_time=max(instance_times),
        median_time=median,
        std_dev_time=math.sqrt(variance),
        instance_times=instance_times,
    )


def write_csv(path: str | PathLike[str], results: Results) -> None:
    """Write per-instance times and the summary to ``path`` as ``;``-separated CSV."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("Instance no.;Time\n")
        for number, elapsed in enumerate(results.instance_times, start=1):
            handle.write(f"{number};{elapsed:g}\n")
        handle.write(f"Average Time:;{results.avg_time:g}\n")
        handle.write(f"Minimum Time:;{results.min_time:g}\n")
        handle.write(f"Maximum Time:;{results.max_time:g}\n")
        handle.write(f"Median Time:;{results.median_time:g}\n")
        handle.write(f"Standard Deviation:;{results.std_dev_time:g}\n")