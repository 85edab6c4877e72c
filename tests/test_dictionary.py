import pytest

from dsakit.dictionary import ChainedDict


def _sample():
    d = ChainedDict()
    for key, value in [(1, 45), (2, 55), (3, 67), (4, 65)]:
        d.insert(key, value)
    return d


def test_render_matches_worked_example():
    expected = (
        "0: \n1: (1,45) \n2: (2,55) \n3: (3,67) \n4: (4,65) \n"
        "5: \n6: \n7: \n8: \n9: \n"
    )
    assert _sample().render() == expected


def test_find_matches_worked_example():
    assert _sample().find(4) == 65


def test_delete_matches_worked_example():
    d = _sample()
    assert d.delete(3) == 67
    expected = (
        "0: \n1: (1,45) \n2: (2,55) \n3: \n4: (4,65) \n"
        "5: \n6: \n7: \n8: \n9: \n"
    )
    assert d.render() == expected
    assert 3 not in d


def test_insert_existing_key_replaces_value():
    d = ChainedDict()
    d.insert(7, "old")
    d.insert(7, "new")
    assert d.find(7) == "new"
    assert len(d) == 1


def test_new_keys_go_to_front_of_bucket():
    d = ChainedDict()
    d.insert(1, "a")
    d.insert(11, "b")
    assert d.buckets()[1] == [(11, "b"), (1, "a")]


def test_find_missing_raises():
    with pytest.raises(KeyError):
        _sample().find(9)


def test_delete_missing_raises():
    with pytest.raises(KeyError):
        _sample().delete(9)


def test_delete_from_middle_of_chain():
    d = ChainedDict()
    for key in (2, 12, 22):
        d.insert(key, key * 10)
    d.delete(12)
    assert [k for k, _ in d.buckets()[2]] == [22, 2]
    assert d.find(2) == 20 and d.find(22) == 220


def test_buckets_are_copies():
    d = _sample()
    d.buckets()[1].clear()
    assert d.find(1) == 45


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        ChainedDict(0)