"""Running sort tests and timed simulations driven by a configuration file."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import TextIO

from .algorithms import Algorithm, quick_sort
from .config import Config, DataType, Direction, Mode, load_config
from .generator import format_array, monotonic_array, random_float_array, random_int_array
from .progressbar import ProgressBar
from .stats import Results, compute_results, write_csv

_INT_BYTES = 4
_FLOAT_BYTES = 4

CSV_NAMES = {
    Algorithm.HEAP_SORT: "heapSortResults.csv",
    Algorithm.INSERTION_SORT: "insertionSortResults.csv",
    Algorithm.QUICK_SORT: "quickSortResults.csv",
    Algorithm.BINARY_INSERTION_SORT: "binaryInsertionSortResults.csv",
}
FLOAT_CSV_NAME = "floatResults.csv"


def _direction(config: Config) -> Direction:
    try:
        return Direction(config.direction)
    except ValueError:
        raise ValueError("Invalid direction") from None


def _int_array(config: Config, rng: random.Random | None) -> list[int]:
    direction = _direction(config)
    if direction is Direction.RANDOM:
        return random_int_array(config.size, config.amount_sorted, rng)
    return monotonic_array(config.size, direction is Direction.ASCENDING, rng)


def _float_array(config: Config, rng: random.Random | None) -> list[float]:
    direction = _direction(config)
    if direction is Direction.RANDOM:
        return random_float_array(config.size, config.amount_sorted, rng)
    return [float(v) for v in monotonic_array(config.size, direction is Direction.ASCENDING, rng)]


def _timed(sort, items: list) -> float:
    start = time.perf_counter()
    sort(items)
    return time.perf_counter() - start


def _report_header(config: Config, memory: int, out: TextIO) -> None:
    print(f"Array size: {config.size}", file=out)
    print(f"Array amount: {config.instance_amount}", file=out)
    print(f"Amount sorted: {config.amount_sorted}%", file=out)
    print(f"Memory allocated: {memory} bytes", file=out)


def _report_results(title: str, results: Results, out: TextIO) -> None:
    print(f"Algorithm: {title}", file=out)
    print(f"Average time: {results.avg_time:g}", file=out)
    print(f"Minimum time: {results.min_time:g}", file=out)
    print(f"Maximum time: {results.max_time:g}", file=out)
    print(f"Median time: {results.median_time:g}", file=out)
    print(f"Standard deviation: {results.std_dev_time:g}", file=out)


def run_test(
    config: Config, out: TextIO | None = None, rng: random.Random | None = None
) -> list:
    """Generate one array, print it, sort it and print the result; return the sorted array.

    Integer data is sorted with the configured algorithm; float data is
    always random and sorted with quicksort.
    """
    out = sys.stdout if out is None else out
    if config.data_type == DataType.INT:
        items: list = _int_array(config, rng)
        print(format_array(items), file=out)
        try:
            algorithm = Algorithm(config.algorithm)
        except ValueError:
            raise ValueError("Invalid algorithm") from None
        print(f"{algorithm.title}:", file=out)
        algorithm.sort(items)
    elif config.data_type == DataType.FLOAT:
        items = random_float_array(config.size, config.amount_sorted, rng)
        print(format_array(items), file=out)
        print(f"{Algorithm.QUICK_SORT.title}:", file=out)
        quick_sort(items)
    else:
        raise ValueError("Invalid data type")
    print(format_array(items), file=out)
    return items


def run_simulation(
    config: Config, out: TextIO | None = None, rng: random.Random | None = None
) -> dict[Algorithm, Results]:
    """Time every algorithm on the same integer arrays and print a summary per algorithm."""
    out = sys.stdout if out is None else out
    instances = [_int_array(config, rng) for _ in range(config.instance_amount)]

    bar = ProgressBar(len(Algorithm) * config.instance_amount, done_char="#", todo_char=" ")
    times: dict[Algorithm, list[float]] = {}
    for algorithm in Algorithm:
        elapsed = []
        for original in instances:
            elapsed.append(_timed(algorithm.sort, list(original)))
            bar.update()
        times[algorithm] = elapsed

    results = {algorithm: compute_results(t) for algorithm, t in times.items()}

    memory = config.instance_amount * config.size * _INT_BYTES * len(Algorithm)
    _report_header(config, memory, out)
    for algorithm, result in results.items():
        _report_results(algorithm.title, result, out)
    return results


def run_float_simulation(
    config: Config, out: TextIO | None = None, rng: random.Random | None = None
) -> Results:
    """Time quicksort on float arrays and print its summary."""
    out = sys.stdout if out is None else out
    instances = [_float_array(config, rng) for _ in range(config.instance_amount)]

    bar = ProgressBar(config.instance_amount, done_char="#", todo_char=" ")
    elapsed = []
    for original in instances:
        elapsed.append(_timed(quick_sort, list(original)))
        bar.update()

    results = compute_results(elapsed)
    memory = config.instance_amount * config.size * _FLOAT_BYTES
    _report_header(config, memory, out)
    _report_results(Algorithm.QUICK_SORT.title, results, out)
    return results


def _save(filename: str, results: Results, prefix: str | None) -> None:
    if prefix is None:
        prefix = input("Enter the path to save the CSV file: ")
    target = prefix + filename
    try:
        write_csv(target, results)
    except OSError:
        print(f"Error opening file for writing: {target}", file=sys.stderr)
    else:
        print(f"Data saved to {target}")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="sortbench", description="Test and time sorting algorithms."
    )
    parser.add_argument("config", nargs="?", help="path to the configuration file")
    parser.add_argument(
        "--csv-prefix",
        default=None,
        help="text put before each CSV file name; asked for when omitted",
    )
    args = parser.parse_args(argv)

    path = args.config
    if path is None:
        path = input("Enter the path to the config file: ")
    try:
        config = load_config(path)
    except OSError:
        print(f"Error opening file: {path}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid config file {path}: {exc}", file=sys.stderr)
        return 1

    try:
        if config.mode == Mode.TEST:
            run_test(config)
        elif config.mode == Mode.SIMULATION and config.data_type == DataType.INT:
            for algorithm, results in run_simulation(config).items():
                _save(CSV_NAMES[algorithm], results, args.csv_prefix)
        elif config.mode == Mode.SIMULATION and config.data_type == DataType.FLOAT:
            _save(FLOAT_CSV_NAME, run_float_simulation(config), args.csv_prefix)
        else:
            print("Invalid mode", file=sys.stderr)
            return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0