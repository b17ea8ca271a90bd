"""
Exact knapsack solving by iterative branch and bound.

    >>> from knapsack_bnb import Instance, solve
    >>> inst = Instance(50, [(60, 10), (100, 20), (120, 30)])
    >>> solve(inst).value
    220
    >>> solve(inst, unbounded=True).value
    300
"""

from .errors import KnapsackError, InvalidInstance, OutOfRange, SearchLimitReached
from .instance import Item, Instance
from .solution import Solution, UnboundedSolution
from .preprocess import prepare_items
from .bound import upper_bound, unbounded_upper_bound
from .search import (
    BranchAndBound,
    UnboundedBranchAndBound,
    SearchLimits,
    SearchState,
    SearchStats,
    solve,
)

__all__ = [
    # errors
    "KnapsackError",
    "InvalidInstance",
    "OutOfRange",
    "SearchLimitReached",
    # data
    "Item",
    "Instance",
    "Solution",
    "UnboundedSolution",
    # engine
    "prepare_items",
    "upper_bound",
    "unbounded_upper_bound",
    "BranchAndBound",
    "UnboundedBranchAndBound",
    "SearchLimits",
    "SearchState",
    "SearchStats",
    "solve",
]
