import pytest

from ascentdl.combined import RelIndexCombined
from ascentdl.indices import RelFullIndex, RelIndex


@pytest.fixture
def pair():
    first = RelIndex()
    second = RelIndex()
    first.index_insert("a", 1)
    first.index_insert("a", 2)
    first.index_insert("b", 3)
    second.index_insert("a", 10)
    second.index_insert("c", 30)
    return first, second


def test_index_get_absent_in_both_is_none(pair):
    combined = RelIndexCombined(*pair)
    assert combined.index_get("zzz") is None


def test_index_get_chains_first_then_second(pair):
    combined = RelIndexCombined(*pair)
    assert list(combined.index_get("a")) == [1, 2, 10]


def test_index_get_only_in_first(pair):
    combined = RelIndexCombined(*pair)
    assert list(combined.index_get("b")) == [3]


def test_index_get_only_in_second(pair):
    combined = RelIndexCombined(*pair)
    assert list(combined.index_get("c")) == [30]


def test_len_is_sum_of_both(pair):
    first, second = pair
    combined = RelIndexCombined(first, second)
    assert len(combined) == len(first) + len(second)


def test_iter_all_reports_every_entry_of_both(pair):
    first, second = pair
    combined = RelIndexCombined(first, second)
    entries = [(key, list(values)) for key, values in combined.iter_all()]
    expected = [(k, list(v)) for k, v in first.iter_all()] + [
        (k, list(v)) for k, v in second.iter_all()
    ]
    assert entries == expected


def test_works_with_full_indices():
    first = RelFullIndex()
    second = RelFullIndex()
    first.index_insert((1, 2), "x")
    second.index_insert((1, 2), "y")
    combined = RelIndexCombined(first, second)
    assert list(combined.index_get((1, 2))) == ["x", "y"]
    assert combined.index_get((2, 1)) is None


def test_empty_indices():
    combined = RelIndexCombined(RelIndex(), RelIndex())
    assert len(combined) == 0
    assert list(combined.iter_all()) == []
    assert combined.index_get(()) is None