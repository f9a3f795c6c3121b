# ascentdl

Building blocks for Datalog-style logic programs. It provides lattices, aggregators over relation rows, and in-memory relation indices.

## Installation

```
pip install ascentdl
```

To run the test suite:

```
pip install "ascentdl[test]"
pytest
```

## Lattices

`ascentdl.lattice` defines the following:

- `Ordering`, with the members `LESS`, `EQUAL` and `GREATER`.
- The abstract classes `Lattice` and `BoundedLattice`.
- The functions `meet`, `join` and `partial_cmp`.

`partial_cmp` returns an `Ordering`. It returns `None` when the two values are incomparable.

The three functions also work on plain values:

- Numbers, strings and booleans are totally ordered. `meet` picks the smaller value and `join` picks the larger.
- Tuples are compared lexicographically.
- `None` counts as an absent value. It sits below every present value.

A `Lattice` subclass gets `<`, `<=`, `>` and `>=` from its `partial_cmp`.

```python
from ascentdl.lattice import Dual, OrdLattice, meet, join

assert meet(OrdLattice(42), OrdLattice(22)) == OrdLattice(22)
assert join(3, 7) == 7

# Dual reverses the order, so join keeps the smaller value.
assert Dual(2) < Dual(1)
assert Dual(5).join(Dual(3)) == Dual(3)
```

Further lattice types:

- `ascentdl.constant_propagation.ConstPropagation` is the flat lattice `bottom()` < `constant(x)` < `top()`. Two constants with different values are incomparable.
- `ascentdl.product.Product` holds a tuple of values, for example `Product((1, 3))`. Products are compared component by component. `meet` and `join` also work per component. Products of different widths raise `ValueError`.
- `ascentdl.sets.Set` is an immutable set ordered by inclusion. `meet` is intersection and `join` is union.
- `ascentdl.sets.BoundedSet` holds at most `bound` items. Once it holds more, it becomes top, which stands for "everything". Its methods are `singleton`, `from_set`, `top`, `bottom`, `count`, `contains` and `is_top`.

```python
from ascentdl.product import Product
from ascentdl.sets import BoundedSet

assert Product((1, 3)).meet(Product((0, 10))) == Product((0, 3))
assert Product((1, 4)).partial_cmp(Product((2, 3))) is None

s = BoundedSet.singleton(2, 10).join(BoundedSet.singleton(2, 11))
assert s.count() == 2
assert s.join(BoundedSet.singleton(2, 12)).is_top()
```

## Aggregators

`ascentdl.aggregators` has these functions. Each one takes an iterable of rows and returns an iterator of results.

| Function | Rows | Result |
| --- | --- | --- |
| `minimum` | 1-tuples | The smallest value. Nothing for no rows. |
| `maximum` | 1-tuples | The largest value. Nothing for no rows. |
| `total` | 1-tuples | The sum. `0` for no rows. |
| `count` | any rows | The number of rows. |
| `mean` | 1-tuples | The average as a float. Nothing for no rows. |
| `percentile(p)` | 1-tuples | An aggregator that yields the value at index `len * p / 100` of the sorted column. For `p` of 100 or more it raises `IndexError`. |
| `negation` | any rows | One empty tuple `()` exactly when there are no rows. |

```python
from ascentdl.aggregators import count, mean, percentile

assert list(mean([(1,), (2,), (3,)])) == [2.0]
assert list(count([(), (), ()])) == [3]
assert list(percentile(50)([(3,), (1,), (2,)])) == [2]
```

## Relation indices

`ascentdl.indices` has four index classes:

- `RelIndex` maps a key to the list of values inserted under it.
- `RelFullIndex` maps a key to a single value. It also has `insert_if_not_present` and `contains_key`.
- `LatticeIndex` maps a key to a set of distinct values.
- `RelNoIndex` has only the empty key `()`. Any other key raises `ValueError`.

All four index classes share these methods:

- `index_insert` adds a value under a key.
- `index_get` returns an iterator over the values for a key, or `None` when the key is absent.
- `iter_all` yields `(key, values)` pairs.
- `move_contents_into` moves every entry into another index of the same kind and leaves the source empty.
- `swap_contents` exchanges the contents of two indices.

Combining indices of different kinds raises `TypeError`.

`merge_delta_to_total_new_to_delta(new, delta, total)` advances one evaluation round. It first moves `delta` into `total`, then moves `new` into `delta`.

```python
from ascentdl.indices import RelIndex, merge_delta_to_total_new_to_delta

new, delta, total = RelIndex(), RelIndex(), RelIndex()
delta.index_insert("a", 1)
new.index_insert("b", 2)
merge_delta_to_total_new_to_delta(new, delta, total)
assert list(total.index_get("a")) == [1]
assert list(delta.index_get("b")) == [2]
assert len(new) == 0
```

`ascentdl.combined.RelIndexCombined(ind1, ind2)` is a read-only view of two indices. Its `index_get` yields the values from both indices, with `ind1` first. Its `iter_all` yields the entries of `ind1` and then those of `ind2`.

## What this package does not do

- It has no rule language and no evaluation engine. You must write the loop that applies rules until a fixpoint yourself, using the indices and `merge_delta_to_total_new_to_delta`.
- All indices are plain in-memory structures for use from one thread. None of them is sharded, locked or otherwise safe for concurrent writers.
- `freeze` and `unfreeze` (from `Freezable`) do nothing on these indices.
- Nothing is persisted. There is no command-line tool.