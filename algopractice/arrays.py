"""Array problems: coin sums, stick lengths and gaps between traffic lights."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from sortedcontainers import SortedList


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Return the smallest sum that no subset of the positive ``coins`` can make."""
    reachable_below = 1
    for coin in sorted(coins):
        if coin > reachable_below:
            break
        reachable_below += coin
    return reachable_below


def min_stick_cost(lengths: Iterable[int]) -> int:
    """Return the least total change needed to make every stick the same length.

    Changing a stick by ``x`` in either direction costs ``x``; all sticks are
    brought to the median length.
    """
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("there must be at least one stick")
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def longest_passages(street_length: int, lights: Sequence[int]) -> list[int]:
    """Return the longest stretch without traffic lights after each light is added.

    The street runs from 0 to ``street_length``; ``lights`` are distinct
    positions strictly inside it, added in the given order.
    """
    if len(set(lights)) != len(lights):
        raise ValueError("traffic light positions must be distinct")
    if any(not 0 < position < street_length for position in lights):
        raise ValueError(f"traffic lights must lie strictly between 0 and {street_length}")
    if not lights:
        return []

    positions = SortedList([0, street_length, *lights])
    longest = max(right - left for left, right in pairwise(positions))
    answers = [longest]
    # Remove the lights newest first: each removal can only merge two gaps.
    for position in reversed(lights[1:]):
        index = positions.index(position)
        longest = max(longest, positions[index + 1] - positions[index - 1])
        del positions[index]
        answers.append(longest)
    answers.reverse()
    return answers