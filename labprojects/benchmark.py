"""Timing comparison of the sorting algorithms on the same random data."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Sequence

from labprojects.sorting import bubble_sort, gnome_sort, insertion_sort, merge_sort, quick_sort

DEFAULT_SIZE = 50000

ALGORITHMS: dict[str, Callable[[list[int]], None]] = {
    "Gnome Sort": gnome_sort,
    "Quick sort": lambda values: quick_sort(values, 0, len(values)),
    "Merge sort": lambda values: merge_sort(values, 0, len(values) - 1),
    "Insertion sort": insertion_sort,
    "Buble sort": bubble_sort,
}


def fill_random(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers in the range 0..999."""
    rng = rng or random.Random()
    return [rng.randrange(1000) for _ in range(size)]


def time_sort(name: str, values: Sequence[int]) -> float:
    """Sort a copy of ``values`` with the named algorithm and return the CPU seconds spent."""
    try:
        algorithm = ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown algorithm: {name!r}") from None
    work = list(values)
    start = time.process_time()
    algorithm(work)
    return time.process_time() - start


def compare(size: int = DEFAULT_SIZE, seed: int | None = None) -> list[tuple[str, float]]:
    """Time every algorithm on the same random data, in a fixed order."""
    original = fill_random(size, random.Random(seed))
    return [(name, time_sort(name, original)) for name in ALGORITHMS]


def format_results(results: Sequence[tuple[str, float]]) -> str:
    """Render timing results one algorithm per line."""
    return "".join(f"{name}: {seconds:f} segundos\n" for name, seconds in results)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the comparison and print the timings."""
    parser = argparse.ArgumentParser(description="Compare sorting algorithm timings.")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    print(format_results(compare(args.size, args.seed)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())