import pytest

from drillbook.arrays import (
    array_sum,
    delete_at,
    find_duplicate,
    find_unique,
    format_values,
    insert_at,
    linear_search,
    max_min,
    reverse,
    sorted_intersection,
    swap_alternate,
)


def test_swap_alternate_odd_length_keeps_last():
    assert swap_alternate([1, 2, 3]) == [2, 1, 3]


@pytest.mark.parametrize("values", [[], [7], [1, 2], [1, 2, 3, 4, 5], [9, 8, 7, 6]])
def test_swap_alternate_twice_is_identity(values):
    assert swap_alternate(swap_alternate(values)) == values


def test_swap_alternate_does_not_mutate():
    data = [1, 2, 3, 4]
    swap_alternate(data)
    assert data == [1, 2, 3, 4]


def test_delete_at_source_example():
    assert delete_at([1, 2, 4, 5, 6], 2) == [1, 2, 5, 6]


def test_insert_at_source_example():
    assert insert_at([1, 2, 4, 5, 6], 2, 3) == [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("index", [0, 2, 4])
def test_insert_then_delete_round_trip(index):
    data = [1, 2, 4, 5, 6]
    assert delete_at(insert_at(data, index, 99), index) == data


def test_insert_at_end():
    assert insert_at([1, 2], 2, 3) == [1, 2, 3]


def test_delete_at_out_of_range():
    with pytest.raises(IndexError):
        delete_at([1, 2], 2)


def test_insert_at_out_of_range():
    with pytest.raises(IndexError):
        insert_at([1, 2], 3, 0)


def test_linear_search():
    data = [10, 20, 30, 40, 50]
    assert linear_search(data, 30) is True
    assert linear_search(data, 35) is False


def test_max_min_matches_builtins():
    data = [4, -2, 9, 0, 3]
    assert max_min(data) == (max(data), min(data))


def test_max_min_single():
    assert max_min([5]) == (5, 5)


def test_max_min_empty():
    with pytest.raises(ValueError):
        max_min([])


def test_reverse_source_example():
    assert reverse([10, 20, 30, 40, 50]) == [50, 40, 30, 20, 10]


def test_reverse_twice_is_identity():
    data = [3, 1, 4, 1, 5]
    assert reverse(reverse(data)) == data


def test_array_sum_is_additive():
    a, b = [1, 2, 3], [10, -4]
    assert array_sum(a + b) == array_sum(a) + array_sum(b)


def test_array_sum_empty():
    assert array_sum([]) == 0


def test_format_values():
    assert format_values([1, 2, 3]) == "1 2 3"


def test_find_unique():
    assert find_unique([2, 3, 7, 2, 3]) == 7


def test_find_duplicate_source_example():
    assert find_duplicate([1, 2, 3, 4, 4]) == 4


def test_find_duplicate_unordered():
    assert find_duplicate([3, 1, 3, 2]) == 3


def test_sorted_intersection_with_duplicates():
    assert sorted_intersection([1, 2, 2, 3], [2, 2, 4]) == [2, 2]


def test_sorted_intersection_is_subset_of_both():
    first, second = [1, 3, 5, 7, 9], [2, 3, 4, 7, 10]
    result = sorted_intersection(first, second)
    assert result == [3, 7]
    assert all(x in first and x in second for x in result)


def test_sorted_intersection_empty():
    assert sorted_intersection([], [1, 2]) == []