"""Small recursion exercises: counting, series, palindromes and subsequences."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def count_up(limit: int) -> list[int]:
    """Return the counter values 0, 1, ... up to but excluding ``limit``."""
    return list(range(limit))


def repeat_name(name: str, times: int) -> str:
    """Return ``name`` written ``times`` times with no separator."""
    return name * max(times, 0)


def one_to_n(n: int) -> list[int]:
    """Return 1 through ``n`` in ascending order."""
    return list(range(1, n + 1))


def n_to_one(n: int) -> list[int]:
    """Return ``n`` down to 1."""
    return list(range(n, 0, -1))


def one_to_n_backtracking(n: int) -> list[int]:
    """Return 1 through ``n``, each value emitted after handling the smaller ones."""
    result: list[int] = []
    pending = list(range(n, 0, -1))
    while pending:
        result.append(pending.pop())
    return result


def n_to_one_backtracking(n: int) -> list[int]:
    """Return ``n`` down to 1, each value emitted after handling the larger ones."""
    result: list[int] = []
    pending = list(range(1, n + 1))
    while pending:
        result.append(pending.pop())
    return result


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def sum_to(n: int) -> int:
    """Return 0 + 1 + ... + ``n``."""
    _require_non_negative(n)
    return sum(range(n + 1))


def factorial(n: int) -> int:
    """Return ``n!``."""
    _require_non_negative(n)
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    _require_non_negative(n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_sequence(n: int) -> list[int]:
    """Return fib(0) through fib(``n``)."""
    _require_non_negative(n)
    sequence = [0, 1]
    while len(sequence) <= n:
        sequence.append(sequence[-1] + sequence[-2])
    return sequence[: n + 1]


def reverse(values: Iterable[T]) -> list[T]:
    """Return the items in reverse order, swapping from both ends inward."""
    items = list(values)
    left, right = 0, len(items) - 1
    while left < right:
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1
    return items


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same from both ends."""
    return all(text[i] == text[-1 - i] for i in range(len(text) // 2))


def subsequences(values: Sequence[T]) -> Iterator[list[T]]:
    """Yield every subsequence, taking each item before leaving it out."""
    items = list(values)
    chosen: list[T] = []

    def walk(index: int) -> Iterator[list[T]]:
        if index == len(items):
            yield list(chosen)
            return
        chosen.append(items[index])
        yield from walk(index + 1)
        chosen.pop()
        yield from walk(index + 1)

    return walk(0)


def subsequences_with_sum(values: Sequence[int], target: int) -> Iterator[list[int]]:
    """Yield, in the order of :func:`subsequences`, those summing to ``target``."""
    return (sub for sub in subsequences(values) if sum(sub) == target)


def first_subsequence_with_sum(values: Sequence[int], target: int) -> list[int] | None:
    """Return the first subsequence summing to ``target``, or None."""
    return next(subsequences_with_sum(values, target), None)


def count_subsequences_with_sum(values: Sequence[int], target: int) -> int:
    """Count the subsequences whose items sum to ``target``."""
    items = list(values)

    def count(index: int, total: int) -> int:
        if index == len(items):
            return 1 if total == target else 0
        return count(index + 1, total + items[index]) + count(index + 1, total)

    return count(0, 0)


def count_digits(n: int) -> int:
    """Count the decimal digits of a positive integer; 0 for ``n`` <= 0."""
    digits = 0
    while n > 0:
        digits += 1
        n //= 10
    return digits