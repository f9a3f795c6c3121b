"""Sets ordered by inclusion, and sets that saturate at a size bound."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Iterator, Optional

from ascentdl.lattice import Lattice, Ordering


@dataclass(frozen=True)
class Set(Lattice):
    """An immutable set ordered by inclusion: meet is intersection, join is union."""

    items: FrozenSet[Any] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", frozenset(self.items))

    @classmethod
    def singleton(cls, item: Any) -> "Set":
        """A set holding only ``item``."""
        return cls(frozenset((item,)))

    def partial_cmp(self, other: "Set") -> Optional[Ordering]:
        if self.items == other.items:
            return Ordering.EQUAL
        if self.items <= other.items:
            return Ordering.LESS
        if self.items >= other.items:
            return Ordering.GREATER
        return None

    def meet(self, other: "Set") -> "Set":
        return Set(self.items & other.items)

    def join(self, other: "Set") -> "Set":
        return Set(self.items | other.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item: Any) -> bool:
        return item in self.items

    def __iter__(self) -> Iterator[Any]:
        return iter(sorted(self.items))

    def __repr__(self) -> str:
        return "{" + ", ".join(repr(item) for item in self) + "}"


@dataclass(frozen=True)
class BoundedSet(Lattice):
    """A set of at most ``bound`` items; growing past the bound yields top.

    Top stands for the set of everything and is held as ``items is None``.
    """

    bound: int
    items: Optional[Set] = field(default_factory=Set)

    def __post_init__(self) -> None:
        if self.bound < 0:
            raise ValueError("bound must not be negative")
        items = self.items
        if items is not None:
            if not isinstance(items, Set):
                items = Set(items)
            if len(items) > self.bound:
                items = None
            object.__setattr__(self, "items", items)

    @classmethod
    def singleton(cls, bound: int, item: Any) -> "BoundedSet":
        """A bounded set holding only ``item``."""
        return cls(bound, Set.singleton(item))

    @classmethod
    def from_set(cls, bound: int, items: Iterable[Any]) -> "BoundedSet":
        """A bounded set of ``items``, or top when there are more than ``bound``."""
        return cls(bound, items if isinstance(items, Set) else Set(items))

    @classmethod
    def top(cls, bound: int) -> "BoundedSet":
        """The set containing everything."""
        return cls(bound, None)

    @classmethod
    def bottom(cls, bound: int) -> "BoundedSet":
        """The empty set."""
        return cls(bound, Set())

    def count(self) -> Optional[int]:
        """The number of items, or ``None`` for top."""
        return None if self.items is None else len(self.items)

    def contains(self, item: Any) -> bool:
        """Whether ``item`` is in the set; always true for top."""
        return True if self.items is None else item in self.items

    def is_top(self) -> bool:
        return self.items is None

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def _check_bound(self, other: "BoundedSet") -> None:
        if self.bound != other.bound:
            raise ValueError(f"bounded sets of different bounds: {self.bound} and {other.bound}")

    def partial_cmp(self, other: "BoundedSet") -> Optional[Ordering]:
        if self.items is None:
            return Ordering.EQUAL if other.items is None else Ordering.GREATER
        if other.items is None:
            return Ordering.LESS
        return self.items.partial_cmp(other.items)

    def meet(self, other: "BoundedSet") -> "BoundedSet":
        self._check_bound(other)
        if self.items is None:
            return other
        if other.items is None:
            return self
        return BoundedSet(self.bound, self.items.meet(other.items))

    def join(self, other: "BoundedSet") -> "BoundedSet":
        self._check_bound(other)
        if self.items is None or other.items is None:
            return BoundedSet.top(self.bound)
        return BoundedSet(self.bound, self.items.join(other.items))