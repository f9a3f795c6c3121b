"""Aggregators over relation rows.

Each aggregator takes an iterable of rows (tuples) and yields zero or one
result. Column aggregators read the single column of one-element rows.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, Iterator, Tuple


def _column(rows: Iterable[Tuple[Any]]) -> Iterator[Any]:
    for (value,) in rows:
        yield value


def minimum(rows: Iterable[Tuple[Any]]) -> Iterator[Any]:
    """Yield the smallest value of the column, if there is any row."""
    values = list(_column(rows))
    if values:
        yield min(values)


def maximum(rows: Iterable[Tuple[Any]]) -> Iterator[Any]:
    """Yield the largest value of the column, if there is any row."""
    values = list(_column(rows))
    if values:
        yield max(values)


def total(rows: Iterable[Tuple[Any]]) -> Iterator[Any]:
    """Yield the sum of the column; zero when there are no rows."""
    yield sum(_column(rows))


def count(rows: Iterable[Any]) -> Iterator[int]:
    """Yield the number of rows."""
    yield sum(1 for _ in rows)


def mean(rows: Iterable[Tuple[Any]]) -> Iterator[float]:
    """Yield the average of the column as a float, if there is any row."""
    acc = 0.0
    n = 0
    for value in _column(rows):
        acc += float(value)
        n += 1
    if n:
        yield acc / n


def percentile(p: float) -> Callable[[Iterable[Tuple[Any]]], Iterator[Any]]:
    """An aggregator yielding the value at percentile ``p`` of the column.

    The value is taken at index ``len * p / 100`` of the sorted column;
    ``p`` of 100 or more therefore has no value and raises ``IndexError``.
    """

    def aggregate(rows: Iterable[Tuple[Any]]) -> Iterator[Any]:
        ordered = sorted(_column(rows))
        if not ordered:
            return
        position = len(ordered) * p / 100.0
        index = 0 if math.isnan(position) or position < 0 else int(position)
        if index >= len(ordered):
            raise IndexError(f"percentile {p} is out of range for {len(ordered)} values")
        yield ordered[index]

    return aggregate


def negation(rows: Iterable[Any]) -> Iterator[Tuple[()]]:
    """Yield one empty row exactly when there are no rows."""
    for _ in rows:
        return
    yield ()