"""Tuples and sequences ordered component by component (the product order)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from ascentdl.lattice import Lattice, Ordering, join, meet, partial_cmp


def _combine(ord1: Ordering, ord2: Ordering) -> Optional[Ordering]:
    if ord1 is Ordering.EQUAL:
        return ord2
    if ord2 is Ordering.EQUAL:
        return ord1
    if ord1 is ord2:
        return ord1
    return None


@dataclass(frozen=True)
class Product(Lattice):
    """A sequence of values compared by the product order.

    ``a <= b`` holds when every component of ``a`` is ``<=`` the matching
    component of ``b``. Unlike the lexicographic order of plain tuples, two
    products may be incomparable. ``meet`` and ``join`` work component-wise.
    """

    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def _check_width(self, other: "Product") -> None:
        if len(self.values) != len(other.values):
            raise ValueError(
                f"products of different widths: {len(self.values)} and {len(other.values)}"
            )

    def partial_cmp(self, other: "Product") -> Optional[Ordering]:
        self._check_width(other)
        result = Ordering.EQUAL
        for mine, theirs in zip(self.values, other.values):
            component = partial_cmp(mine, theirs)
            if component is None:
                return None
            combined = _combine(component, result)
            if combined is None:
                return None
            result = combined
        return result

    def meet(self, other: "Product") -> "Product":
        self._check_width(other)
        return Product(tuple(meet(a, b) for a, b in zip(self.values, other.values)))

    def join(self, other: "Product") -> "Product":
        self._check_width(other)
        return Product(tuple(join(a, b) for a, b in zip(self.values, other.values)))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]