import pytest

from ascentdl.indices import (
    Freezable,
    LatticeIndex,
    RelFullIndex,
    RelIndex,
    RelNoIndex,
    merge_delta_to_total_new_to_delta,
)


def _as_dict(index):
    return {key: sorted(values) for key, values in index.iter_all()}


def test_rel_index_insert_and_get():
    index = RelIndex()
    index.index_insert((1,), "a")
    index.index_insert((1,), "b")
    index.index_insert((2,), "c")
    assert sorted(index.index_get((1,))) == ["a", "b"]
    assert list(index.index_get((2,))) == ["c"]
    assert index.index_get((3,)) is None
    assert len(index) == 2


def test_rel_index_keeps_duplicates():
    index = RelIndex()
    index.index_insert("k", 7)
    index.index_insert("k", 7)
    assert list(index.index_get("k")) == [7, 7]


def test_rel_index_move_merges_and_empties_source():
    source = RelIndex()
    target = RelIndex()
    for value in range(5):
        source.index_insert("shared", value)
    source.index_insert("only_source", 10)
    target.index_insert("shared", 20)
    target.index_insert("only_target", 30)
    source.move_contents_into(target)
    assert len(source) == 0
    assert _as_dict(target) == {
        "shared": [0, 1, 2, 3, 4, 20],
        "only_source": [10],
        "only_target": [30],
    }


def test_rel_index_move_into_other_kind_raises():
    with pytest.raises(TypeError):
        RelIndex().move_contents_into(LatticeIndex())


def test_swap_contents():
    first = RelIndex()
    second = RelIndex()
    first.index_insert("x", 1)
    first.swap_contents(second)
    assert len(first) == 0
    assert list(second.index_get("x")) == [1]


def test_full_index_insert_if_not_present():
    index = RelFullIndex()
    assert index.insert_if_not_present((1, 2), "first")
    assert not index.insert_if_not_present((1, 2), "second")
    assert list(index.index_get((1, 2))) == ["first"]
    assert index.contains_key((1, 2))
    assert not index.contains_key((2, 1))
    assert index.index_get((2, 1)) is None


def test_full_index_insert_overwrites():
    index = RelFullIndex()
    index.index_insert("k", 1)
    index.index_insert("k", 2)
    assert list(index.index_get("k")) == [2]
    assert len(index) == 1


def test_full_index_move_and_iter_all():
    source = RelFullIndex()
    target = RelFullIndex()
    source.index_insert("a", 1)
    target.index_insert("b", 2)
    source.move_contents_into(target)
    assert len(source) == 0
    assert _as_dict(target) == {"a": [1], "b": [2]}


def test_lattice_index_deduplicates_and_merges():
    source = LatticeIndex()
    target = LatticeIndex()
    source.index_insert("k", 1)
    source.index_insert("k", 1)
    source.index_insert("k", 2)
    target.index_insert("k", 2)
    target.index_insert("j", 3)
    assert sorted(source.index_get("k")) == [1, 2]
    source.move_contents_into(target)
    assert len(source) == 0
    assert _as_dict(target) == {"k": [1, 2], "j": [3]}
    assert target.index_get("missing") is None


def test_no_index_collects_values():
    index = RelNoIndex()
    index.index_insert((), "x")
    index.index_insert((), "y")
    assert list(index.index_get(())) == ["x", "y"]
    entries = [(key, list(values)) for key, values in index.iter_all()]
    assert entries == [((), ["x", "y"])]


def test_no_index_rejects_non_empty_key():
    with pytest.raises(ValueError):
        RelNoIndex().index_insert((1,), "x")


def test_no_index_move_appends():
    source = RelNoIndex()
    target = RelNoIndex()
    source.index_insert((), 1)
    target.index_insert((), 2)
    source.move_contents_into(target)
    assert list(target.index_get(())) == [2, 1]
    assert list(source.index_get(())) == []


def test_merge_delta_to_total_new_to_delta():
    new, delta, total = RelIndex(), RelIndex(), RelIndex()
    new.index_insert("n", 1)
    delta.index_insert("d", 2)
    total.index_insert("t", 3)
    merge_delta_to_total_new_to_delta(new, delta, total)
    assert _as_dict(total) == {"d": [2], "t": [3]}
    assert _as_dict(delta) == {"n": [1]}
    assert len(new) == 0


def test_freeze_leaves_index_usable():
    index = RelFullIndex()
    assert isinstance(index, Freezable)
    index.freeze()
    index.index_insert("k", 1)
    index.unfreeze()
    assert list(index.index_get("k")) == [1]