import math

import pytest

from dsakit.avl import AVLDictionary


@pytest.fixture
def sample():
    d = AVLDictionary()
    d.insert("apple", "a fruit")
    d.insert("book", "something to read")
    d.insert("zebra", "a wild animal")
    d.insert("cat", "a pet")
    return d


def test_items_in_ascending_order(sample):
    assert sample.items() == [
        ("apple", "a fruit"),
        ("book", "something to read"),
        ("cat", "a pet"),
        ("zebra", "a wild animal"),
    ]


def test_height_of_sample(sample):
    assert sample.height() == 3


def test_search_found_counts_comparisons(sample):
    result = sample.search("cat")
    assert result.found is True
    assert result.meaning == "a pet"
    assert result.comparisons == 3


def test_search_missing(sample):
    result = sample.search("dog")
    assert result.found is False
    assert result.meaning is None
    assert 1 <= result.comparisons <= sample.height()


def test_duplicate_keeps_first_meaning(sample):
    sample.insert("apple", "a company")
    assert sample.search("apple").meaning == "a fruit"
    assert len(sample) == 4


def test_empty_dictionary():
    d = AVLDictionary()
    assert d.height() == 0
    assert d.items() == []
    assert d.search("x").comparisons == 0


def test_sorted_inserts_stay_balanced():
    d = AVLDictionary()
    words = [f"w{i:03d}" for i in range(100)]
    for word in words:
        d.insert(word, word.upper())
    assert [w for w, _ in d.items()] == words
    assert d.height() <= 1.45 * math.log2(len(words) + 2)
    assert all(d.search(w).comparisons <= d.height() for w in words)
    assert "w050" in d