import pytest

from dsakit.hashing import LinearProbingTable, QuadraticProbingTable, TableFullError


@pytest.mark.parametrize("cls", [LinearProbingTable, QuadraticProbingTable])
def test_first_key_in_home_slot_takes_one_comparison(cls):
    table = cls()
    assert table.insert(42) == 1
    assert table.slots()[42 % 10] == 42


def test_linear_collisions_count_up():
    table = LinearProbingTable()
    assert [table.insert(k) for k in (5, 15, 25)] == [1, 2, 3]
    assert table.slots()[5:8] == [5, 15, 25]


def test_linear_probing_wraps_around():
    table = LinearProbingTable()
    table.insert(9)
    table.insert(19)
    assert table.slots().index(19) == (9 + 1) % 10


def test_quadratic_probing_jumps_by_squares():
    table = QuadraticProbingTable()
    for key in (5, 15, 25):
        table.insert(key)
    assert table.slots()[9] == 25


def test_linear_table_full():
    table = LinearProbingTable()
    for key in range(1, 11):
        table.insert(key)
    with pytest.raises(TableFullError):
        table.insert(11)
    assert None not in table.slots()


def test_quadratic_gives_up_before_table_is_full():
    table = QuadraticProbingTable()
    inserted = []
    with pytest.raises(TableFullError):
        for key in range(10, 110, 10):
            table.insert(key)
            inserted.append(key)
    assert None in table.slots()
    assert sorted(k for k in table.slots() if k is not None) == inserted


@pytest.mark.parametrize("cls", [LinearProbingTable, QuadraticProbingTable])
def test_total_is_sum_of_comparisons(cls):
    table = cls()
    counts = [table.insert(k) for k in (3, 13, 23, 7, 17)]
    assert table.total_comparisons() == sum(counts)
    assert sorted(c for _, c in table.comparisons()) == sorted(counts)


def test_comparisons_listed_in_slot_order():
    table = LinearProbingTable()
    for key in (8, 1, 11):
        table.insert(key)
    keys = [key for key, _ in table.comparisons()]
    assert keys == [k for k in table.slots() if k is not None]


def test_render_lines():
    table = LinearProbingTable()
    table.insert(3)
    lines = table.render().splitlines()
    assert len(lines) == 10
    assert lines[0] == "0 ------> NULL"
    assert lines[3] == "3 ------> 3"


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        LinearProbingTable(0)