"""A read-only view that joins two indices with the same keys into one."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Hashable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class RelIndexCombined:
    """Two indices read as one: lookups yield the values of both, ``ind1`` first."""

    ind1: Any
    ind2: Any

    def index_get(self, key: Hashable) -> Optional[Iterator[Any]]:
        """The values under ``key`` in both indices, or ``None`` when neither has it."""
        first = self.ind1.index_get(key)
        second = self.ind2.index_get(key)
        if first is None and second is None:
            return None
        return itertools.chain(
            first if first is not None else (),
            second if second is not None else (),
        )

    def iter_all(self) -> Iterator[Tuple[Hashable, Iterator[Any]]]:
        """The entries of ``ind1`` followed by those of ``ind2``.

        A key present in both indices is reported once for each.
        """
        return itertools.chain(self.ind1.iter_all(), self.ind2.iter_all())

    def __len__(self) -> int:
        return len(self.ind1) + len(self.ind2)