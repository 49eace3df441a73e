"""Counting problems over sequences: rounds, distinct values, runs and sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise


def count_rounds(permutation: Sequence[int]) -> int:
    """Return how many left-to-right passes collect the values in increasing order.

    Every pass collects as many values as possible in order. Equal values are
    taken in order of position.
    """
    order = sorted(range(len(permutation)), key=permutation.__getitem__)
    return 1 + sum(later < earlier for earlier, later in pairwise(order))


def count_distinct(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    return len(set(values))


def longest_unique_run(songs: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive items with no repeats."""
    if not songs:
        raise ValueError("the playlist must not be empty")
    last_seen: dict[int, int] = {}
    window_start = 0
    longest = 1
    for position, song in enumerate(songs):
        previous = last_seen.get(song)
        if previous is not None:
            window_start = max(window_start, previous + 1)
        longest = max(longest, position - window_start + 1)
        last_seen[song] = position
    return longest


def count_subarrays_with_sum(values: Iterable[int], target: int) -> int:
    """Return the number of contiguous non-empty subarrays whose sum is ``target``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in values:
        prefix += value
        count += prefix_counts[prefix - target]
        prefix_counts[prefix] += 1
    return count


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous non-empty subarray."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("the array must not be empty")
    return best


def nearest_smaller_positions(values: Sequence[int]) -> list[int]:
    """For each position, return the 1-based position of the nearest strictly
    smaller value to its left, or 0 when there is none."""
    stack: list[int] = []
    answer: list[int] = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        answer.append(stack[-1] + 1 if stack else 0)
        stack.append(index)
    return answer