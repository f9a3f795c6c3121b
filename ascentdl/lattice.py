"""Lattice abstractions and the lattice structure of ordinary values.

Plain values take part in lattices too:

* numbers, strings and booleans form total orders, so ``meet`` picks the
  smaller value and ``join`` the larger one;
* tuples are ordered lexicographically, so ``meet`` and ``join`` are the
  lexicographic minimum and maximum;
* ``None`` is an optional value that is absent, and sits below every
  present value.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Ordering(enum.Enum):
    """The result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        """The ordering seen from the other side of the comparison."""
        return Ordering(-self.value)


class Lattice(ABC):
    """A partial order in which every pair has a meet and a join.

    Subclasses provide ``partial_cmp``, ``meet`` and ``join``; the comparison
    operators follow from ``partial_cmp``.
    """

    @abstractmethod
    def partial_cmp(self, other: Any) -> Optional[Ordering]:
        """Compare with ``other``; ``None`` when the two are incomparable."""

    @abstractmethod
    def meet(self, other: Any) -> Any:
        """The greatest lower bound of ``self`` and ``other``."""

    @abstractmethod
    def join(self, other: Any) -> Any:
        """The least upper bound of ``self`` and ``other``."""

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.partial_cmp(other) is Ordering.LESS

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.partial_cmp(other) is Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.GREATER, Ordering.EQUAL)


class BoundedLattice(Lattice):
    """A lattice with a least element and a greatest element."""

    @classmethod
    @abstractmethod
    def bottom(cls) -> Any:
        """The least element."""

    @classmethod
    @abstractmethod
    def top(cls) -> Any:
        """The greatest element."""


def partial_cmp(a: Any, b: Any) -> Optional[Ordering]:
    """Compare two values; ``None`` when they are incomparable."""
    if isinstance(a, Lattice):
        return a.partial_cmp(b)
    if a is None or b is None:
        if a is None and b is None:
            return Ordering.EQUAL
        return Ordering.LESS if a is None else Ordering.GREATER
    if a < b:
        return Ordering.LESS
    if a == b:
        return Ordering.EQUAL
    if a > b:
        return Ordering.GREATER
    return None


def meet(a: Any, b: Any) -> Any:
    """The greatest lower bound of two values."""
    if isinstance(a, Lattice):
        return a.meet(b)
    if a is None or b is None:
        return None
    return a if a <= b else b


def join(a: Any, b: Any) -> Any:
    """The least upper bound of two values."""
    if isinstance(a, Lattice):
        return a.join(b)
    if a is None:
        return b
    if b is None:
        return a
    return a if a >= b else b


@dataclass(frozen=True)
class Dual(Lattice, Generic[T]):
    """A wrapper that turns the order, and so ``meet`` and ``join``, upside down."""

    value: T

    def partial_cmp(self, other: "Dual[T]") -> Optional[Ordering]:
        return partial_cmp(other.value, self.value)

    def meet(self, other: "Dual[T]") -> "Dual[T]":
        return Dual(join(self.value, other.value))

    def join(self, other: "Dual[T]") -> "Dual[T]":
        return Dual(meet(self.value, other.value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrdLattice(Lattice, Generic[T]):
    """A totally ordered value seen as a lattice: meet is min, join is max."""

    value: T

    def partial_cmp(self, other: "OrdLattice[T]") -> Optional[Ordering]:
        return partial_cmp(self.value, other.value)

    def meet(self, other: "OrdLattice[T]") -> "OrdLattice[T]":
        return self if self.value <= other.value else other

    def join(self, other: "OrdLattice[T]") -> "OrdLattice[T]":
        return other if self.value <= other.value else self