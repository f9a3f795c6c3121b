"""In-memory indices over relation rows.

An index maps a key, a projection of a row, to the values stored for it.
Rule evaluation keeps three versions of each index: the facts known so far
(total), those found in the last round (delta) and those found in the
current round (new). ``merge_delta_to_total_new_to_delta`` advances them by
one round.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Optional, Set, Tuple, TypeVar

_I = TypeVar("_I", bound="_Index")


class Freezable:
    """An index that can be switched between a writable and a read-only state.

    The in-memory indices need no such switch, so both methods do nothing.
    """

    def freeze(self) -> None:
        """Make the index ready for reading."""

    def unfreeze(self) -> None:
        """Make the index ready for writing."""


class _Index(Freezable):
    """Common behaviour of the in-memory indices."""

    _data: Any

    def __len__(self) -> int:
        return len(self._data)

    def _check_same_kind(self, other: "_Index") -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine a {type(self).__name__} with a {type(other).__name__}"
            )

    def _swap_with(self, other: "_Index") -> None:
        self._check_same_kind(other)
        self._data, other._data = other._data, self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class RelIndex(_Index):
    """An index from a key to the list of values inserted under it."""

    def __init__(self) -> None:
        self._data: Dict[Hashable, List[Any]] = {}

    def index_insert(self, key: Hashable, value: Any) -> None:
        """Add ``value`` under ``key``."""
        self._data.setdefault(key, []).append(value)

    def index_get(self, key: Hashable) -> Optional[Iterator[Any]]:
        """The values under ``key``, or ``None`` when the key is absent."""
        values = self._data.get(key)
        return None if values is None else iter(values)

    def iter_all(self) -> Iterator[Tuple[Hashable, Iterator[Any]]]:
        """Every key paired with an iterator over its values."""
        for key, values in self._data.items():
            yield key, iter(values)

    def move_contents_into(self, target: "RelIndex") -> None:
        """Move every entry into ``target``, leaving this index empty."""
        self._check_same_kind(target)
        if len(self._data) > len(target._data):
            self._data, target._data = target._data, self._data
        for key, values in self._data.items():
            existing = target._data.get(key)
            if existing is None:
                target._data[key] = values
                continue
            if len(values) > len(existing):
                values, existing = existing, values
                target._data[key] = existing
            existing.extend(values)
        self._data = {}

    def swap_contents(self, other: "RelIndex") -> None:
        """Exchange the contents of this index with those of ``other``."""
        self._swap_with(other)


class RelFullIndex(_Index):
    """An index over whole rows: at most one value for each key."""

    def __init__(self) -> None:
        self._data: Dict[Hashable, Any] = {}

    def index_insert(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        self._data[key] = value

    def index_get(self, key: Hashable) -> Optional[Iterator[Any]]:
        """An iterator over the single value under ``key``, or ``None``."""
        if key not in self._data:
            return None
        return iter((self._data[key],))

    def iter_all(self) -> Iterator[Tuple[Hashable, Iterator[Any]]]:
        """Every key paired with an iterator over its single value."""
        for key, value in self._data.items():
            yield key, iter((value,))

    def move_contents_into(self, target: "RelFullIndex") -> None:
        """Move every entry into ``target``, leaving this index empty.

        Entries of this index win over entries of ``target`` with the same key.
        """
        self._check_same_kind(target)
        target._data.update(self._data)
        self._data = {}

    def swap_contents(self, other: "RelFullIndex") -> None:
        """Exchange the contents of this index with those of ``other``."""
        self._swap_with(other)

    def insert_if_not_present(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` under ``key`` unless the key is present; report whether it was stored."""
        if key in self._data:
            return False
        self._data[key] = value
        return True

    def contains_key(self, key: Hashable) -> bool:
        """Whether ``key`` has a value."""
        return key in self._data

    def __contains__(self, key: Hashable) -> bool:
        return self.contains_key(key)


class LatticeIndex(_Index):
    """An index from a key to the set of distinct values inserted under it."""

    def __init__(self) -> None:
        self._data: Dict[Hashable, Set[Any]] = {}

    def index_insert(self, key: Hashable, value: Hashable) -> None:
        """Add ``value`` under ``key``; duplicates are kept once."""
        self._data.setdefault(key, set()).add(value)

    def index_get(self, key: Hashable) -> Optional[Iterator[Any]]:
        """The values under ``key``, or ``None`` when the key is absent."""
        values = self._data.get(key)
        return None if values is None else iter(values)

    def iter_all(self) -> Iterator[Tuple[Hashable, Iterator[Any]]]:
        """Every key paired with an iterator over its values."""
        for key, values in self._data.items():
            yield key, iter(values)

    def move_contents_into(self, target: "LatticeIndex") -> None:
        """Move every entry into ``target``, leaving this index empty."""
        self._check_same_kind(target)
        for key, values in self._data.items():
            target._data.setdefault(key, set()).update(values)
        self._data = {}

    def swap_contents(self, other: "LatticeIndex") -> None:
        """Exchange the contents of this index with those of ``other``."""
        self._swap_with(other)


class RelNoIndex(_Index):
    """An index with the empty key only: a plain list of values."""

    def __init__(self) -> None:
        self._data: List[Any] = []

    @staticmethod
    def _check_key(key: Any) -> None:
        if key != ():
            raise ValueError(f"an index without key columns takes only the empty key, not {key!r}")

    def index_insert(self, key: Tuple[()], value: Any) -> None:
        """Append ``value``; ``key`` must be the empty tuple."""
        self._check_key(key)
        self._data.append(value)

    def index_get(self, key: Tuple[()]) -> Optional[Iterator[Any]]:
        """An iterator over every value; ``key`` must be the empty tuple."""
        self._check_key(key)
        return iter(self._data)

    def iter_all(self) -> Iterator[Tuple[Tuple[()], Iterator[Any]]]:
        """The empty key paired with an iterator over every value."""
        yield (), iter(self._data)

    def move_contents_into(self, target: "RelNoIndex") -> None:
        """Append every value to ``target``, leaving this index empty."""
        self._check_same_kind(target)
        target._data.extend(self._data)
        self._data = []

    def swap_contents(self, other: "RelNoIndex") -> None:
        """Exchange the contents of this index with those of ``other``."""
        self._swap_with(other)


def merge_delta_to_total_new_to_delta(new: _I, delta: _I, total: _I) -> None:
    """Advance one round: delta joins total, and new becomes the next delta.

    Afterwards ``new`` holds what ``delta`` was left with, which is nothing.
    """
    delta.move_contents_into(total)
    new.swap_contents(delta)