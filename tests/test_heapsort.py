import pytest

from dsakit.heapsort import heap_sort, mark_range


@pytest.mark.parametrize(
    "values",
    [
        [],
        [5],
        [3, 1, 2],
        [9, 8, 7, 6, 5, 4, 3, 2, 1],
        [4, 4, 1, 4, 0, -3, 12],
        list(range(50)),
    ],
)
def test_heap_sort_matches_sorted(values):
    assert heap_sort(values) == sorted(values)


def test_heap_sort_leaves_input_alone():
    values = [3, 1, 2]
    heap_sort(values)
    assert values == [3, 1, 2]


def test_heap_sort_accepts_generators():
    assert heap_sort(x % 7 for x in range(20)) == sorted(x % 7 for x in range(20))


def test_mark_range():
    result = mark_range([67, 89, 45, 92, 78])
    assert result.highest == 92
    assert result.lowest == 45


def test_mark_range_single():
    assert tuple(mark_range([55])) == (55, 55)


def test_mark_range_empty():
    with pytest.raises(ValueError):
        mark_range([])