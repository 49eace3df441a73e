"""Greedy matching problems solved by sorting and two pointers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


def allocate_apartments(
    applicants: Iterable[int], apartments: Iterable[int], tolerance: int
) -> int:
    """Return how many applicants can get an apartment.

    An applicant wanting size ``d`` accepts any apartment whose size lies in
    ``d - tolerance .. d + tolerance``; each apartment goes to one applicant.
    """
    wanted = SortedList(applicants)
    allotted = 0
    for size in sorted(apartments):
        index = wanted.bisect_left(size - tolerance)
        if index < len(wanted) and wanted[index] <= size + tolerance:
            del wanted[index]
            allotted += 1
    return allotted


def sell_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int | None]:
    """Serve customers in order, each with the dearest ticket not above their offer.

    Returns the price each customer paid, or None when no ticket was left
    that they could afford.
    """
    tickets = SortedList(prices)
    sold: list[int | None] = []
    for offer in offers:
        index = tickets.bisect_right(offer)
        if index == 0:
            sold.append(None)
        else:
            sold.append(tickets.pop(index - 1))
    return sold


def count_gondolas(weights: Iterable[int], max_weight: int) -> int:
    """Return the fewest gondolas, each carrying one or two children, needed for all."""
    ordered = sorted(weights)
    light, heavy = 0, len(ordered) - 1
    gondolas = 0
    while light <= heavy:
        gondolas += 1
        if light == heavy:
            break
        if ordered[light] + ordered[heavy] <= max_weight:
            light += 1
        heavy -= 1
    return gondolas


def find_pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return 1-based positions ``(i, j)``, ``i < j``, of two values summing to ``target``.

    The first ``j`` that completes a pair is chosen, paired with the latest
    earlier position holding the complement. Returns None if there is no pair.
    """
    last_position: dict[int, int] = {}
    for position, value in enumerate(values, start=1):
        partner = last_position.get(target - value)
        if partner is not None:
            return partner, position
        last_position[value] = position
    return None


def find_values_with_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return two values, smaller first, from distinct positions summing to ``target``.

    Returns None if there is no such pair.
    """
    ordered = sorted(values)
    low, high = 0, len(ordered) - 1
    while low < high:
        total = ordered[low] + ordered[high]
        if total == target:
            return ordered[low], ordered[high]
        if total > target:
            high -= 1
        else:
            low += 1
    return None