"""
Solutions returned by the solvers.

A solution keeps its own snapshot of the instance items, so appending items
to the instance afterwards does not change what the solution refers to.
"""

from __future__ import annotations

import math
from typing import List

from .instance import check_index


def _total(terms):
    # fsum is exactly rounded, so a float total does not depend on item order
    if any(isinstance(t, float) for t in terms):
        return math.fsum(terms)
    return sum(terms, 0)


class _SelectionBase:
    def __init__(self, instance):
        self._items = instance.items
        self._counts = [0] * len(self._items)

    def _check(self, i):
        check_index(i, len(self._counts))

    @property
    def value(self):
        return _total([n * it.value for it, n in zip(self._items, self._counts) if n])

    @property
    def cost(self):
        return _total([n * it.cost for it, n in zip(self._items, self._counts) if n])

    def is_taken(self, i: int) -> bool:
        self._check(i)
        return self._counts[i] > 0

    def remove(self, i: int) -> None:
        """Stop taking item i."""
        self._check(i)
        self._counts[i] = 0

    def taken_indices(self) -> List[int]:
        return [i for i, n in enumerate(self._counts) if n]

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(value={self.value!r}, cost={self.cost!r}, "
                f"taken={self.taken_indices()})")


class Solution(_SelectionBase):
    """0/1 selection: each item is taken or not."""

    def add(self, i: int) -> None:
        self._check(i)
        self._counts[i] = 1

    def set(self, i: int, taken: bool) -> None:
        self._check(i)
        self._counts[i] = 1 if taken else 0

    def __getitem__(self, i: int) -> bool:
        return self.is_taken(i)

    def to_list(self) -> List[bool]:
        return [n > 0 for n in self._counts]


class UnboundedSolution(_SelectionBase):
    """Multiset selection: a non-negative take count per item."""

    def add(self, i: int) -> None:
        """Take one more unit of item i."""
        self._check(i)
        self._counts[i] += 1

    def set(self, i: int, count: int) -> None:
        self._check(i)
        if count < 0:
            raise ValueError(f"take count must be >= 0, got {count}")
        self._counts[i] = count

    def count(self, i: int) -> int:
        self._check(i)
        return self._counts[i]

    def __getitem__(self, i: int) -> int:
        return self.count(i)

    def to_list(self) -> List[int]:
        return list(self._counts)
