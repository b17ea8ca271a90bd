"""
Iterative depth-first branch and bound.

Items are explored in ratio order (see `prepare_items`). The search keeps an
explicit decision stack instead of recursing, so its depth is bounded by the
number of items rather than by the interpreter's call stack.

At each depth the engine first tries to take the item (one unit for 0/1, as
many units as fit for the unbounded variant) and only explores the
alternatives when it backtracks. A subtree is pruned as soon as its
fractional bound cannot strictly beat the incumbent, so among solutions of
equal value the first one found is returned.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .bound import unbounded_upper_bound, upper_bound
from .errors import InvalidInstance, SearchLimitReached
from .instance import Instance
from .preprocess import prepare_items
from .solution import Solution, UnboundedSolution

logger = logging.getLogger(__name__)


class SearchState(enum.Enum):
    DESCEND = "descend"
    BACKTRACK = "backtrack"
    DONE = "done"


@dataclass(frozen=True)
class SearchLimits:
    """
    Optional stopping rules, checked at every descend step.

    Attributes
    ----------
    node_limit : int | None
        Maximum number of descend steps.
    time_limit : float | None
        Wall-clock seconds allowed for the search.
    """
    node_limit: Optional[int] = None
    time_limit: Optional[float] = None


@dataclass
class SearchStats:
    """Counters from the last solve."""
    nodes: int = 0
    prunes: int = 0
    leaves: int = 0
    improvements: int = 0
    elapsed: float = 0.0


class _BranchAndBoundBase:
    solution_class = None

    def __init__(self, limits: Optional[SearchLimits] = None):
        self.limits = limits or SearchLimits()
        self.stats = SearchStats()
        self._deadline = None

    def solve(self, instance: Instance):
        """Return an optimal selection over the original item order of `instance`."""
        sorted_items = prepare_items(instance)
        self._validate(sorted_items)

        self.stats = SearchStats()
        start = time.perf_counter()
        if self.limits.time_limit is not None:
            self._deadline = start + self.limits.time_limit
        else:
            self._deadline = None

        try:
            best_value, best_stack = self._search(sorted_items, instance.budget)
        finally:
            self.stats.elapsed = time.perf_counter() - start

        logger.debug(
            "%s: best=%r nodes=%d prunes=%d leaves=%d improvements=%d in %.4fs",
            type(self).__name__, best_value, self.stats.nodes, self.stats.prunes,
            self.stats.leaves, self.stats.improvements, self.stats.elapsed,
        )

        solution = self.solution_class(instance)
        self._assemble(solution, sorted_items, best_stack)
        return solution

    def _validate(self, sorted_items):
        pass

    def _step(self, best_value):
        # Called once per descend step.
        self.stats.nodes += 1
        node_limit = self.limits.node_limit
        if node_limit is not None and self.stats.nodes > node_limit:
            logger.warning("search stopped after %d nodes (node_limit=%d)",
                           self.stats.nodes - 1, node_limit)
            raise SearchLimitReached(
                f"node limit of {node_limit} reached", best_value, self.stats.nodes - 1)
        if self._deadline is not None and time.perf_counter() > self._deadline:
            logger.warning("search stopped after %d nodes (time_limit=%rs)",
                           self.stats.nodes, self.limits.time_limit)
            raise SearchLimitReached(
                f"time limit of {self.limits.time_limit}s reached", best_value, self.stats.nodes)

    def _search(self, sorted_items, budget):
        raise NotImplementedError

    def _assemble(self, solution, sorted_items, best_stack):
        raise NotImplementedError


class BranchAndBound(_BranchAndBoundBase):
    """Exact solver for the 0/1 knapsack: each item is taken at most once."""
    solution_class = Solution

    def _search(self, sorted_items, budget_left) -> Tuple[object, List[int]]:
        n = len(sorted_items)
        depth = 0
        value = 0
        best_value = 0
        stack: List[int] = []
        best_stack: List[int] = []
        state = SearchState.DESCEND

        while state is not SearchState.DONE:
            if state is SearchState.DESCEND:
                self._step(best_value)
                if depth == n:
                    self.stats.leaves += 1
                    if value > best_value:
                        best_value = value
                        best_stack = list(stack)
                        self.stats.improvements += 1
                    state = SearchState.BACKTRACK
                    continue

                item = sorted_items[depth][0]
                if item.cost > budget_left:
                    depth += 1
                    continue
                if upper_bound(sorted_items, depth, value, budget_left) <= best_value:
                    self.stats.prunes += 1
                    state = SearchState.BACKTRACK
                    continue

                stack.append(depth)
                value += item.value
                budget_left -= item.cost
                depth += 1

            else:
                if not stack:
                    state = SearchState.DONE
                    continue
                depth = stack.pop()
                item = sorted_items[depth][0]
                value -= item.value
                budget_left += item.cost
                depth += 1
                state = SearchState.DESCEND

        return best_value, best_stack

    def _assemble(self, solution, sorted_items, best_stack):
        for depth in best_stack:
            solution.add(sorted_items[depth][1])


class UnboundedBranchAndBound(_BranchAndBoundBase):
    """Exact solver for the unbounded knapsack: items may be taken repeatedly."""
    solution_class = UnboundedSolution

    def _validate(self, sorted_items):
        # prepare_items has already dropped items with value <= 0
        for item, index in sorted_items:
            if item.cost == 0:
                raise InvalidInstance(
                    f"item {index} has zero cost and positive value; "
                    "the unbounded objective has no maximum")

    def _search(self, sorted_items, budget_left) -> Tuple[object, List[Tuple[int, int]]]:
        n = len(sorted_items)
        depth = 0
        value = 0
        best_value = 0
        # entries are [depth, units]; units shrink by one per backtrack
        stack: List[List[int]] = []
        best_stack: List[Tuple[int, int]] = []
        state = SearchState.DESCEND

        while state is not SearchState.DONE:
            if state is SearchState.DESCEND:
                self._step(best_value)
                if depth == n:
                    self.stats.leaves += 1
                    if value > best_value:
                        best_value = value
                        best_stack = [(d, units) for d, units in stack]
                        self.stats.improvements += 1
                    state = SearchState.BACKTRACK
                    continue

                item = sorted_items[depth][0]
                if item.cost > budget_left:
                    depth += 1
                    continue
                if unbounded_upper_bound(sorted_items, depth, value, budget_left) <= best_value:
                    self.stats.prunes += 1
                    state = SearchState.BACKTRACK
                    continue

                units = int(budget_left // item.cost)
                stack.append([depth, units])
                value += units * item.value
                budget_left -= units * item.cost
                depth += 1

            else:
                if not stack:
                    state = SearchState.DONE
                    continue
                top = stack[-1]
                depth = top[0]
                top[1] -= 1
                if top[1] == 0:
                    stack.pop()
                item = sorted_items[depth][0]
                value -= item.value
                budget_left += item.cost
                depth += 1
                state = SearchState.DESCEND

        return best_value, best_stack

    def _assemble(self, solution, sorted_items, best_stack):
        for depth, units in best_stack:
            solution.set(sorted_items[depth][1], units)


def solve(instance: Instance, unbounded: bool = False, limits: Optional[SearchLimits] = None):
    """Solve `instance` with the 0/1 solver, or the unbounded one if asked."""
    solver_cls = UnboundedBranchAndBound if unbounded else BranchAndBound
    return solver_cls(limits).solve(instance)
