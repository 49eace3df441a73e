"""Scheduling problems: intervals, rooms, tasks and production time."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import IntEnum
from itertools import accumulate


class _Event(IntEnum):
    # Arrivals sort before departures that happen at the same moment.
    ARRIVAL = 0
    DEPARTURE = 1


def max_movies(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most movies, given as (start, end), that can be watched entirely.

    Movies are taken greedily by earliest end; one may start at the moment the
    previous one ends. Watching begins at time 0.
    """
    watched = 0
    last_end = 0
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        if start >= last_end:
            watched += 1
            last_end = end
    return watched


def max_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of customers present at once.

    Intervals are (arrival, departure); a customer arriving at the moment
    another leaves is counted as present together with them.
    """
    events = sorted(
        (time, kind)
        for arrival, departure in intervals
        for time, kind in ((arrival, _Event.ARRIVAL), (departure, _Event.DEPARTURE))
    )
    deltas = (1 if kind is _Event.ARRIVAL else -1 for _, kind in events)
    return max(accumulate(deltas), default=0) if events else 0


def allocate_rooms(stays: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Assign rooms to stays given as (arrival, departure).

    Two stays share a room only if the first departs strictly before the
    second arrives. Returns the number of rooms used and, for each stay in
    input order, its 1-based room number. Freed rooms are reused in the
    order they were freed.
    """
    events = sorted(
        (time, kind, index)
        for index, (arrival, departure) in enumerate(stays)
        for time, kind in ((arrival, _Event.ARRIVAL), (departure, _Event.DEPARTURE))
    )
    rooms = [0] * len(stays)
    free_rooms: deque[int] = deque()
    opened = 0
    for _, kind, index in events:
        if kind is _Event.ARRIVAL:
            if free_rooms:
                rooms[index] = free_rooms.popleft()
            else:
                opened += 1
                rooms[index] = opened
        else:
            free_rooms.append(rooms[index])
    return opened, rooms


def max_task_reward(tasks: Iterable[tuple[int, int]]) -> int:
    """Return the best total reward for tasks given as (duration, deadline).

    Each task earns its deadline minus its finishing time; all tasks are done
    one after another starting at time 0, shortest first.
    """
    reward = 0
    finish = 0
    for duration, deadline in sorted(tasks):
        finish += duration
        reward += deadline - finish
    return reward


def min_reading_time(times: Iterable[int]) -> int:
    """Return the least time for two readers to each read every book.

    No book may be read by both readers at once.
    """
    ordered = list(times)
    if not ordered:
        raise ValueError("there must be at least one book")
    return max(sum(ordered), 2 * max(ordered))


def _products_made(time: int, machine_times: Sequence[int]) -> int:
    return sum(time // per_item for per_item in machine_times)


def min_production_time(machine_times: Iterable[int], products: int) -> int:
    """Return the shortest time in which the machines together make ``products`` items.

    Each machine needs its given number of seconds per item and machines
    work simultaneously.
    """
    machines = list(machine_times)
    if not machines:
        raise ValueError("there must be at least one machine")
    if any(per_item <= 0 for per_item in machines):
        raise ValueError("machine times must be positive")
    low, high = 0, products * max(machines)
    answer = high
    while low <= high:
        mid = low + (high - low) // 2
        if _products_made(mid, machines) >= products:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer