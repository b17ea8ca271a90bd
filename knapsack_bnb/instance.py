"""
Problem instance: items and a budget.

Value and cost may be any real number type (int, float, Fraction, Decimal),
chosen by the caller and kept the same across one instance.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Iterable, Tuple, Union

from .errors import InvalidInstance, OutOfRange

Number = Union[int, float, Decimal, numbers.Real]


def _check_number(x, what):
    if isinstance(x, bool) or not isinstance(x, (numbers.Real, Decimal)):
        raise InvalidInstance(f"{what} must be a real number, got {x!r}")
    if x != x:
        raise InvalidInstance(f"{what} must not be NaN")


def check_index(i, n):
    """Raise unless `i` is an integer in [0, n); negative indices do not wrap."""
    if isinstance(i, bool) or not isinstance(i, numbers.Integral):
        raise TypeError(f"item index must be an integer, got {i!r}")
    if not 0 <= i < n:
        raise OutOfRange(f"item index {i} out of range [0, {n})")


def divide(num, den):
    """
    num / den without integer truncation.

    Rational operands (int, Fraction) give an exact Fraction: float division
    of ints above 2**53 rounds, which can push a bound below an achievable
    value or misorder near-equal ratios.
    """
    if isinstance(num, numbers.Rational) and isinstance(den, numbers.Rational):
        return Fraction(num, den)
    return num / den


@dataclass(frozen=True)
class Item:
    """An item with a value and a cost."""
    value: Number
    cost: Number

    def __post_init__(self) -> None:
        _check_number(self.value, "Item.value")
        _check_number(self.cost, "Item.cost")
        if self.cost < 0:
            raise InvalidInstance(f"Item.cost must be >= 0, got {self.cost!r}")

    @property
    def ratio(self):
        """Value per unit of cost; free items rank above everything else."""
        if self.cost == 0:
            return math.inf
        return divide(self.value, self.cost)


class Instance:
    """
    Ordered items plus a budget.

    The item order is the identity used by every Solution computed from this
    instance. Items can be appended and the budget changed until solving;
    nothing can be removed or updated.
    """
    def __init__(self, budget: Number = 0, items: Iterable = ()):
        self._items = []
        self._budget = 0
        self.set_budget(budget)
        for it in items:
            if isinstance(it, Item):
                self._items.append(it)
            else:
                value, cost = it
                self.add_item(value, cost)

    @classmethod
    def from_lists(cls, values, costs, budget) -> "Instance":
        if len(values) != len(costs):
            raise InvalidInstance(
                f"got {len(values)} values but {len(costs)} costs")
        return cls(budget, zip(values, costs))

    @property
    def budget(self):
        return self._budget

    def set_budget(self, budget: Number) -> None:
        _check_number(budget, "budget")
        if budget < 0:
            raise InvalidInstance(f"budget must be >= 0, got {budget!r}")
        self._budget = budget

    def add_item(self, value: Number, cost: Number) -> int:
        """Append an item and return its index."""
        self._items.append(Item(value, cost))
        return len(self._items) - 1

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i: int) -> Item:
        check_index(i, len(self._items))
        return self._items[i]

    def __iter__(self):
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Instance(budget={self._budget!r}, items={len(self._items)})"
