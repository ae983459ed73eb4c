"""Comparison sorts and a small timing harness that records results as CSV."""

from __future__ import annotations

import argparse
import csv
import random
import sys
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

CSV_HEADER = ("n", "Time taken (ms)")
DEFAULT_OUTPUT = "sorting_times.csv"
DEFAULT_LOW = 1
DEFAULT_HIGH = 10000

SortFunction = Callable[[Iterable[int]], list[int]]


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using selection sort."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using quicksort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using top-down merge sort (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def random_array(
    n: int,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
    rng: random.Random | None = None,
) -> list[int]:
    """Return ``n`` random integers drawn uniformly from ``low`` to ``high`` inclusive."""
    if n < 0:
        raise ValueError("array size must not be negative")
    if low > high:
        raise ValueError("low must not exceed high")
    source = rng if rng is not None else random.Random()
    return [source.randint(low, high) for _ in range(n)]


def benchmark(
    sort: SortFunction,
    sizes: Iterable[int],
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
    rng: random.Random | None = None,
) -> Iterator[tuple[int, float]]:
    """Yield ``(n, milliseconds)`` of CPU time taken by ``sort`` on random arrays."""
    source = rng if rng is not None else random.Random()
    for n in sizes:
        data = random_array(n, low, high, source)
        start = time.process_time()
        sort(data)
        elapsed = (time.process_time() - start) * 1000
        yield n, elapsed


def write_csv(path: str | Path, rows: Iterable[tuple[int, float]]) -> None:
    """Write timing rows to ``path`` with a header, times to two decimals.

    The file is opened before ``rows`` is consumed, so rows may be produced lazily.
    """
    with open(path, "w", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for n, elapsed in rows:
            writer.writerow((n, f"{elapsed:.2f}"))


_ALGORITHMS: dict[str, tuple[SortFunction, range]] = {
    "selection": (selection_sort, range(1000, 10001, 1000)),
    "quick": (quick_sort, range(5000, 10001, 500)),
    "merge": (merge_sort, range(5000, 10001, 500)),
}


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="algolab-sort",
        description="Time a sorting algorithm on random arrays and save the results as CSV.",
    )
    parser.add_argument("algorithm", nargs="?", choices=sorted(_ALGORITHMS), default="quick")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--start", type=int, help="smallest array size")
    parser.add_argument("--stop", type=int, help="largest array size")
    parser.add_argument("--step", type=int, help="size increment")
    parser.add_argument("--low", type=int, default=DEFAULT_LOW)
    parser.add_argument("--high", type=int, default=DEFAULT_HIGH)
    parser.add_argument("--seed", type=int, help="seed for reproducible arrays")
    args = parser.parse_args(argv)
    if args.step is not None and args.step <= 0:
        parser.error("--step must be positive")
    if args.low > args.high:
        parser.error("--low must not exceed --high")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the timing benchmark from the command line; return the exit status."""
    args = _parse_args(argv)
    sort, default_sizes = _ALGORITHMS[args.algorithm]
    start = args.start if args.start is not None else default_sizes.start
    stop = args.stop if args.stop is not None else default_sizes.stop - 1
    step = args.step if args.step is not None else default_sizes.step
    sizes = range(start, stop + 1, step)
    rng = random.Random(args.seed)

    def reported() -> Iterator[tuple[int, float]]:
        for n, elapsed in benchmark(sort, sizes, args.low, args.high, rng):
            print(f"Time taken to sort {n} elements: {elapsed:.2f} ms")
            yield n, elapsed

    try:
        write_csv(args.output, reported())
    except OSError:
        print("Error opening file.")
        return 1
    print(f"Data saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())