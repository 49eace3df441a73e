import pytest

from algopractice.counting import (
    count_distinct,
    count_rounds,
    count_subarrays_with_sum,
    longest_unique_run,
    max_subarray_sum,
    nearest_smaller_positions,
)


def test_count_rounds_sorted_needs_one_round():
    assert count_rounds([1, 2, 3, 4, 5]) == 1


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_count_rounds_reversed_needs_n_rounds(n):
    assert count_rounds(list(range(n, 0, -1))) == n


def test_count_rounds_worked_example():
    assert count_rounds([4, 2, 1, 5, 3]) == 3


def test_count_distinct_all_equal():
    assert count_distinct([7, 7, 7, 7]) == 1


def test_count_distinct_empty():
    assert count_distinct([]) == 0


def test_count_distinct_duplicated_range():
    assert count_distinct(list(range(10)) + list(range(10))) == 10


def test_count_distinct_accepts_iterator():
    assert count_distinct(iter([3, 1, 3])) == 2


def test_longest_unique_run_all_distinct():
    songs = [5, 3, 9, 1, 2]
    assert longest_unique_run(songs) == len(songs)


def test_longest_unique_run_all_same():
    assert longest_unique_run([4, 4, 4, 4]) == 1


def test_longest_unique_run_worked_example():
    assert longest_unique_run([1, 2, 1, 3, 2, 7, 4, 2]) == 5


def test_longest_unique_run_empty_raises():
    with pytest.raises(ValueError):
        longest_unique_run([])


def test_count_subarrays_single_match():
    assert count_subarrays_with_sum([5], 5) == 1


def test_count_subarrays_no_match():
    assert count_subarrays_with_sum([1, 2, 3], 100) == 0


def test_count_subarrays_empty():
    assert count_subarrays_with_sum([], 0) == 0


def test_count_subarrays_worked_example():
    assert count_subarrays_with_sum([2, -1, 3, 5, -2], 7) == 2


def test_max_subarray_all_negative_is_largest_element():
    values = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_all_positive_is_total():
    values = [4, 1, 7, 2]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_single():
    assert max_subarray_sum([-7]) == -7


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_nearest_smaller_increasing():
    assert nearest_smaller_positions([1, 2, 3, 4]) == [0, 1, 2, 3]


def test_nearest_smaller_decreasing_and_equal():
    assert nearest_smaller_positions([4, 3, 2, 1]) == [0, 0, 0, 0]
    assert nearest_smaller_positions([2, 2, 2]) == [0, 0, 0]


def test_nearest_smaller_invariant():
    values = [2, 5, 1, 4, 8, 3, 2, 5]
    result = nearest_smaller_positions(values)
    assert len(result) == len(values)
    for index, position in enumerate(result):
        if position:
            assert position - 1 < index
            assert values[position - 1] < values[index]
            assert all(v >= values[index] for v in values[position:index])
        else:
            assert all(v >= values[index] for v in values[:index])


def test_nearest_smaller_empty():
    assert nearest_smaller_positions([]) == []