"""Number-theory tables and searching helpers."""

from __future__ import annotations

from collections.abc import Sequence


def add(*args: int) -> int:
    """Return the sum of two or three integers."""
    if len(args) not in (2, 3):
        raise TypeError(f"add() takes 2 or 3 arguments ({len(args)} given)")
    return sum(args)


def binary_search(
    values: Sequence[int], target: int, start: int = 0, end: int | None = None
) -> int:
    """Find ``target`` in the sorted slice ``values[start:end + 1]``.

    Returns the index of a matching element, or -1 when there is none.
    """
    if end is None:
        end = len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def _check_bound(n: int) -> None:
    if n < 0:
        raise ValueError(f"bound must be non-negative, got {n}")


def divisors_table(n: int) -> list[list[int]]:
    """Return, for every j in 0..n, its divisors greater than 1 in ascending order."""
    _check_bound(n)
    table: list[list[int]] = [[] for _ in range(n + 1)]
    for i in range(2, n + 1):
        for j in range(i, n + 1, i):
            table[j].append(i)
    return table


def sieve(n: int) -> list[bool]:
    """Return a list whose entry j tells whether j (0..n) is prime."""
    _check_bound(n)
    is_prime = [True] * (n + 1)
    is_prime[0] = False
    if n >= 1:
        is_prime[1] = False
    for i in range(2, n + 1):
        if is_prime[i]:
            multiples = range(2 * i, n + 1, i)
            is_prime[2 * i :: i] = [False] * len(multiples)
    return is_prime


def smallest_and_largest_prime_factors(n: int) -> tuple[list[int], list[int]]:
    """Return (lowest, highest): the smallest and largest prime factor of each j in 0..n.

    Entries for 0 and 1 are 0.
    """
    _check_bound(n)
    is_prime = [True] * (n + 1)
    lowest = [0] * (n + 1)
    highest = [0] * (n + 1)
    for i in range(2, n + 1):
        if not is_prime[i]:
            continue
        lowest[i] = highest[i] = i
        for j in range(2 * i, n + 1, i):
            is_prime[j] = False
            highest[j] = i
            if lowest[j] == 0:
                lowest[j] = i
    return lowest, highest


def prime_factors(number: int, limit: int | None = None) -> list[int]:
    """Return the distinct prime factors of ``number`` in ascending order.

    The factor table is built up to ``limit`` (``number`` by default), which
    must not be smaller than ``number``.
    """
    if limit is None:
        limit = max(number, 0)
    if number > limit:
        raise ValueError(f"number {number} exceeds the table limit {limit}")
    if number <= 1:
        return []
    _, highest = smallest_and_largest_prime_factors(limit)
    factors: set[int] = set()
    while number > 1:
        factor = highest[number]
        while number % factor == 0:
            number //= factor
            factors.add(factor)
    return sorted(factors)