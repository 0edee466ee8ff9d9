import pytest

from numdrills.arrays import (
    fibonacci_element,
    find_max,
    find_min,
    has_unique_occurrences,
    missing_number,
    reverse_array,
    rotate_by_one,
    search_element,
    second_largest,
)

SAMPLE = [2, 89, 78905, 6790, 78, 234, 0, -123, 45678]
SEARCH = [7, 90, 89, 90, 56, 77, 98, 67]


def test_min_and_max_of_sample():
    assert find_min(SAMPLE) == -123
    assert find_max(SAMPLE) == 78905


def test_min_max_bound_every_value():
    low, high = find_min(SAMPLE), find_max(SAMPLE)
    assert all(low <= value <= high for value in SAMPLE)
    assert low in SAMPLE and high in SAMPLE


@pytest.mark.parametrize("func", [find_min, find_max])
def test_extremes_of_empty_raise(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize("key", SEARCH)
def test_search_finds_first_occurrence(key):
    index = search_element(SEARCH, key)
    assert SEARCH[index] == key
    assert key not in SEARCH[:index]


def test_search_missing_returns_none():
    assert search_element(SEARCH, 1234) is None


def test_reverse_array():
    data = [3, 5, 8, 90, 34, 65, 98, 45, 89, 12]
    result = reverse_array(data)
    assert result[0] == 12 and result[-1] == 3
    assert reverse_array(result) == data
    assert data == [3, 5, 8, 90, 34, 65, 98, 45, 89, 12]


def test_unique_occurrences():
    assert has_unique_occurrences([1, 2, 2, 1, 1, 3]) is True
    assert has_unique_occurrences([1, 2]) is False


def test_fibonacci_first_elements():
    assert fibonacci_element(1) == 0
    assert fibonacci_element(2) == 1


@pytest.mark.parametrize("n", range(3, 40))
def test_fibonacci_recurrence(n):
    assert fibonacci_element(n) == fibonacci_element(n - 1) + fibonacci_element(n - 2)


def test_fibonacci_rejects_non_positive():
    with pytest.raises(ValueError):
        fibonacci_element(0)


@pytest.mark.parametrize("size", [1, 2, 5, 10])
def test_missing_number_finds_each_gap(size):
    for gap in range(size + 1):
        values = [value for value in range(size + 1) if value != gap]
        assert missing_number(values[::-1]) == gap


def test_rotate_by_one():
    data = [0, 9, 89, 67, 90]
    assert rotate_by_one(data) == [90, 0, 9, 89, 67]
    rotated = data
    for _ in data:
        rotated = rotate_by_one(rotated)
    assert rotated == data


def test_rotate_empty():
    assert rotate_by_one([]) == []


def test_second_largest():
    data = [3, 5, 8, 90, 34, 90]
    result = second_largest(data)
    assert result == 34
    assert result < find_max(data)


@pytest.mark.parametrize("data", [[], [5], [7, 7, 7]])
def test_second_largest_missing_raises(data):
    with pytest.raises(ValueError):
        second_largest(data)