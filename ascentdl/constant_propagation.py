"""The flat lattice used for constant propagation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from ascentdl.lattice import BoundedLattice, Ordering


class _Tag(enum.Enum):
    BOTTOM = "Bottom"
    CONSTANT = "Constant"
    TOP = "Top"


@dataclass(frozen=True)
class ConstPropagation(BoundedLattice):
    """Bottom, below every constant, below Top.

    Two constants compare equal when their values are equal and are
    incomparable otherwise.
    """

    _tag: _Tag
    value: Any = None

    @classmethod
    def constant(cls, value: Any) -> "ConstPropagation":
        """A known constant value."""
        return cls(_Tag.CONSTANT, value)

    @classmethod
    def bottom(cls) -> "ConstPropagation":
        return cls(_Tag.BOTTOM)

    @classmethod
    def top(cls) -> "ConstPropagation":
        return cls(_Tag.TOP)

    @property
    def is_bottom(self) -> bool:
        return self._tag is _Tag.BOTTOM

    @property
    def is_top(self) -> bool:
        return self._tag is _Tag.TOP

    @property
    def is_constant(self) -> bool:
        return self._tag is _Tag.CONSTANT

    def partial_cmp(self, other: "ConstPropagation") -> Optional[Ordering]:
        if self.is_bottom:
            return Ordering.EQUAL if other.is_bottom else Ordering.LESS
        if self.is_top:
            return Ordering.EQUAL if other.is_top else Ordering.GREATER
        if other.is_bottom:
            return Ordering.GREATER
        if other.is_top:
            return Ordering.LESS
        return Ordering.EQUAL if self.value == other.value else None

    def meet(self, other: "ConstPropagation") -> "ConstPropagation":
        if self.is_bottom:
            return self
        if self.is_top:
            return other
        if other.is_bottom:
            return other
        if other.is_top:
            return self
        return self if self.value == other.value else ConstPropagation.bottom()

    def join(self, other: "ConstPropagation") -> "ConstPropagation":
        if self.is_bottom:
            return other
        if self.is_top:
            return self
        if other.is_bottom:
            return self
        if other.is_top:
            return other
        return self if self.value == other.value else ConstPropagation.top()

    def __repr__(self) -> str:
        if self.is_constant:
            return f"Constant({self.value!r})"
        return self._tag.value