"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort with passes of adjacent swaps, stopping once a pass swaps nothing."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for left in range(end):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
                swapped = True
        if not swapped:
            break
    return items


def recursive_bubble_sort(values: Iterable[T]) -> list[T]:
    """Bubble sort where each pass recurses on the unsorted prefix."""
    items = list(values)

    def sort_prefix(size: int) -> None:
        if size <= 1:
            return
        swapped = False
        for left in range(size - 1):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
                swapped = True
        if swapped:
            sort_prefix(size - 1)

    sort_prefix(len(items))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly moving the smallest remaining item to the front."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by sinking each new item left until it is in place."""
    items = list(values)
    for current in range(1, len(items)):
        position = current
        while position > 0 and items[position - 1] > items[position]:
            items[position - 1], items[position] = items[position], items[position - 1]
            position -= 1
    return items


def _merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    merged: list[T] = []
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


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[T], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quick sort that partitions around the first item of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(items, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return items


def _read_counted_values(text: str) -> list[int]:
    tokens = text.split()
    if not tokens:
        raise ValueError("expected a count followed by that many integers")
    count = int(tokens[0])
    if count < 0:
        raise ValueError("count must not be negative")
    numbers = tokens[1 : 1 + count]
    if len(numbers) < count:
        raise ValueError(f"expected {count} integers, got {len(numbers)}")
    return [int(token) for token in numbers]


def main(argv: Sequence[str] | None = None) -> int:
    """Bubble-sort integers given as arguments, or as a counted list on stdin."""
    parser = argparse.ArgumentParser(
        prog="dsaprimer-sort",
        description="Sort integers with bubble sort. Without arguments, read "
        "a count followed by that many integers from standard input.",
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)

    if args.values:
        values = args.values
    else:
        try:
            values = _read_counted_values(sys.stdin.read())
        except ValueError as error:
            parser.error(str(error))

    result = recursive_bubble_sort(values)
    sys.stdout.write("Bubble Sort \n")
    sys.stdout.write("".join(f"{value} " for value in result))
    return 0


if __name__ == "__main__":
    sys.exit(main())