"""Classic in-place sorting algorithms and a step-by-step gnome sort trace."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterator, MutableSequence, Sequence

TRACE_FILE = "GnomeSort.txt"
WORST_CASE = (9, 7, 6, 5, 4, 3, 2)


def gnome_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with gnome sort."""
    pos = 0
    while pos < len(values):
        if pos == 0 or values[pos] >= values[pos - 1]:
            pos += 1
        else:
            values[pos], values[pos - 1] = values[pos - 1], values[pos]
            pos -= 1


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with insertion sort."""
    for i in range(1, len(values)):
        pivot = values[i]
        j = i - 1
        while j >= 0 and values[j] > pivot:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = pivot


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with bubble sort."""
    size = len(values)
    for i in range(size):
        for j in range(size - 1 - i):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]


def quick_sort(values: MutableSequence[int], left: int = 0, right: int | None = None) -> None:
    """Sort ``values[left:right]`` in place with quicksort (``right`` is exclusive)."""
    if right is None:
        right = len(values)
    if right - left < 1:
        return
    i = left
    j = right - 1
    pivot = values[(left + right) // 2]

    while i <= j:
        while i < right and values[i] < pivot:
            i += 1
        while j > left and values[j] > pivot:
            j -= 1
        if i <= j:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1

    if j > left:
        quick_sort(values, left, j + 1)
    if i < right - 1:
        quick_sort(values, i, right)


def merge(values: MutableSequence[int], left: int, middle: int, right: int) -> None:
    """Merge the sorted runs ``values[left..middle]`` and ``values[middle+1..right]``."""
    lower = list(values[left:middle + 1])
    upper = list(values[middle + 1:right + 1])
    values[left:right + 1] = list(heapq.merge(lower, upper))


def merge_sort(values: MutableSequence[int], left: int = 0, right: int | None = None) -> None:
    """Sort ``values[left..right]`` in place with merge sort (``right`` is inclusive)."""
    if right is None:
        right = len(values) - 1
    if left < right:
        middle = left + (right - left) // 2
        merge_sort(values, left, middle)
        merge_sort(values, middle + 1, right)
        merge(values, left, middle, right)


def gnome_sort_steps(values: Sequence[int]) -> Iterator[tuple[int, tuple[int, ...]]]:
    """Gnome sort a copy of ``values``, yielding the position and state before each step."""
    work = list(values)
    pos = 0
    while pos < len(work):
        yield pos, tuple(work)
        if pos == 0 or work[pos] >= work[pos - 1]:
            pos += 1
        else:
            work[pos], work[pos - 1] = work[pos - 1], work[pos]
            pos -= 1


def _trace_line(pos: int, state: Sequence[int]) -> str:
    numbers = "".join(f"{value} " for value in state)
    return f"Posição nessa iteração: {pos}.    Vetor: {numbers}\n"


def write_gnome_trace(values: Sequence[int], path: str) -> None:
    """Write every gnome sort step for ``values`` to the file at ``path``."""
    with open(path, "w", encoding="utf-8") as out:
        for pos, state in gnome_sort_steps(values):
            out.write(_trace_line(pos, state))


def main(argv: Sequence[str] | None = None) -> int:
    """Write the gnome sort trace of the worst-case vector."""
    parser = argparse.ArgumentParser(description="Gnome sort step-by-step trace.")
    parser.add_argument("output", nargs="?", default=TRACE_FILE)
    args = parser.parse_args(argv)
    try:
        write_gnome_trace(WORST_CASE, args.output)
    except OSError:
        print("\nNão foi possível criar arquivo\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())