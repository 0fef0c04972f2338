import pytest

from arrayalgos.search import (
    find_missing,
    find_single,
    is_sorted,
    largest,
    linear_search,
    majority_element,
    second_largest,
)


@pytest.mark.parametrize(
    "values", [[8, 10, 5, 7, 9], [1], [-3, -7, -1], [4, 4, 4]]
)
def test_largest_matches_max(values):
    assert largest(values) == max(values)


def test_largest_source_example():
    assert largest([8, 10, 5, 7, 9]) == 10


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])


def test_second_largest_source_example():
    assert second_largest([8, 10, 1, 17, 11]) == 11


def test_second_largest_ignores_duplicates_of_max():
    values = [9, 3, 9, 9, 2]
    result = second_largest(values)
    assert result < max(values)
    assert result == max(v for v in values if v != max(values))


@pytest.mark.parametrize("values", [[], [5], [5, 5, 5]])
def test_second_largest_without_distinct_second_raises(values):
    with pytest.raises(ValueError):
        second_largest(values)


def test_linear_search_returns_first_occurrence():
    values = [2, 4, 5, 1, 2]
    for target in values:
        index = linear_search(values, target)
        assert values[index] == target
        assert target not in values[:index]


def test_linear_search_missing_is_none():
    assert linear_search([2, 4, 5, 1, 2], 42) is None


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 4, 5], True),
        ([], True),
        ([7], True),
        ([1, 1, 2, 2], True),
        ([1, 3, 2], False),
        ([5, 4, 3, 2, 1], False),
    ],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_is_sorted_agrees_with_sorted():
    values = [3, 1, 2]
    assert is_sorted(sorted(values)) is True
    assert is_sorted(values) is False


def test_find_missing_source_example():
    assert find_missing([1, 2, 3, 5]) == 4


@pytest.mark.parametrize("missing", [1, 2, 5, 9, 10])
def test_find_missing_round_trip(missing):
    values = [n for n in range(1, 11) if n != missing]
    assert find_missing(values) == missing


def test_find_single_source_example():
    assert find_single([2, 2, 1]) == 1


@pytest.mark.parametrize("single", [0, 3, 7, 100])
def test_find_single_round_trip(single):
    values = [1, 3, 5, 7, 9]
    paired = [v for v in values if v != single]
    mixed = paired + [single] + list(reversed(paired))
    assert find_single(mixed) == single


def test_find_single_all_paired_raises():
    with pytest.raises(ValueError):
        find_single([1, 1, 2, 2])


def test_majority_element_source_example():
    assert majority_element([4, 4, 2, 4, 3, 4, 4, 3, 2, 4]) == 4


def test_majority_element_result_is_a_real_majority():
    values = [7, 1, 7, 2, 7, 7, 3]
    result = majority_element(values)
    assert values.count(result) > len(values) // 2


@pytest.mark.parametrize("values", [[], [1, 2], [1, 2, 3, 1, 2, 3]])
def test_majority_element_absent(values):
    assert majority_element(values) is None