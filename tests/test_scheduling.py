import itertools

import pytest

from algopractice.scheduling import (
    allocate_rooms,
    max_customers,
    max_movies,
    max_task_reward,
    min_production_time,
    min_reading_time,
)


# max_movies

def test_max_movies_disjoint_all_watched():
    movies = [(1, 2), (3, 4), (5, 6), (7, 8)]
    assert max_movies(movies) == len(movies)


def test_max_movies_back_to_back_allowed():
    movies = [(1, 3), (3, 5), (5, 7)]
    assert max_movies(movies) == len(movies)


def test_max_movies_identical_overlap_counts_one():
    assert max_movies([(1, 5)] * 4) == 1


def test_max_movies_empty():
    assert max_movies([]) == 0


def test_max_movies_adding_never_decreases():
    movies = [(3, 5), (4, 9), (5, 8), (1, 4), (6, 7)]
    counts = [max_movies(movies[:k]) for k in range(len(movies) + 1)]
    assert counts == sorted(counts)
    assert all(c <= k for k, c in enumerate(counts))


# max_customers

def test_max_customers_disjoint():
    assert max_customers([(1, 2), (3, 4), (5, 6)]) == 1


def test_max_customers_all_overlapping():
    intervals = [(1, 10), (2, 9), (3, 8), (4, 7)]
    assert max_customers(intervals) == len(intervals)


def test_max_customers_arrival_counted_before_departure():
    assert max_customers([(1, 3), (3, 5)]) == 2


def test_max_customers_empty():
    assert max_customers([]) == 0


# allocate_rooms

def test_allocate_rooms_worked_example():
    assert allocate_rooms([(1, 2), (2, 4), (4, 4)]) == (2, [1, 2, 1])


def _check_allocation(stays):
    count, rooms = allocate_rooms(stays)
    assert len(rooms) == len(stays)
    assert set(rooms) == set(range(1, count + 1))
    for first, second in itertools.combinations(range(len(stays)), 2):
        if rooms[first] == rooms[second]:
            a1, d1 = stays[first]
            a2, d2 = stays[second]
            assert d1 < a2 or d2 < a1
    return count


@pytest.mark.parametrize(
    "stays",
    [
        [(1, 2), (2, 4), (4, 4)],
        [(1, 10), (2, 3), (4, 5), (6, 7), (8, 9)],
        [(5, 6), (1, 2), (3, 4), (1, 6), (2, 5)],
        [(1, 1)],
    ],
)
def test_allocate_rooms_invariants(stays):
    count = _check_allocation(stays)
    assert count == max_customers(stays)


def test_allocate_rooms_empty():
    assert allocate_rooms([]) == (0, [])


# max_task_reward

def test_max_task_reward_worked_example():
    assert max_task_reward([(6, 10), (8, 15), (5, 12)]) == 2


def test_max_task_reward_single_task():
    duration, deadline = 4, 11
    assert max_task_reward([(duration, deadline)]) == deadline - duration


def test_max_task_reward_order_independent():
    tasks = [(6, 10), (8, 15), (5, 12), (1, 3)]
    expected = max_task_reward(tasks)
    for perm in itertools.permutations(tasks):
        assert max_task_reward(list(perm)) == expected


# min_reading_time

def test_min_reading_time_worked_example():
    assert min_reading_time([2, 8, 3]) == 16


def test_min_reading_time_single_book():
    assert min_reading_time([7]) == 2 * 7


def test_min_reading_time_balanced_books_take_sum():
    times = [5, 5, 5, 5]
    assert min_reading_time(times) == sum(times)


def test_min_reading_time_lower_bounds():
    times = [3, 9, 1, 4, 4]
    result = min_reading_time(times)
    assert result >= sum(times)
    assert result >= 2 * max(times)


def test_min_reading_time_empty_raises():
    with pytest.raises(ValueError):
        min_reading_time([])


# min_production_time

def test_min_production_time_worked_example():
    assert min_production_time([3, 2, 5], 7) == 8


def test_min_production_time_single_machine():
    assert min_production_time([4], 6) == 4 * 6


@pytest.mark.parametrize(
    "machines, products",
    [([3, 2, 5], 7), ([1, 1, 1], 10), ([7, 11], 13), ([2], 1), ([9, 4, 6, 3], 50)],
)
def test_min_production_time_is_minimal(machines, products):
    result = min_production_time(machines, products)
    assert sum(result // m for m in machines) >= products
    assert sum((result - 1) // m for m in machines) < products


def test_min_production_time_zero_products():
    assert min_production_time([3, 5], 0) == 0


def test_min_production_time_no_machines_raises():
    with pytest.raises(ValueError):
        min_production_time([], 5)


def test_min_production_time_non_positive_machine_raises():
    with pytest.raises(ValueError):
        min_production_time([3, 0], 5)