"""
Fractional-relaxation upper bounds.

Both functions expect `sorted_items` as produced by `prepare_items`: a list of
(item, original_index) pairs in descending ratio order. The bounds are only
valid under that ordering.

With int or Fraction inputs the fractional term is an exact Fraction, so a
bound never rounds below a value the search could still reach.
"""

from .instance import divide


def upper_bound(sorted_items, depth, value, budget_left):
    """
    Upper bound on the value reachable from `depth` when each remaining item
    may be taken at most once.

    Whole items are taken greedily; the first item that does not fit is taken
    fractionally and the walk stops there.
    """
    n = len(sorted_items)
    while depth < n:
        item = sorted_items[depth][0]
        if item.cost > budget_left:
            return value + divide(budget_left * item.value, item.cost)
        budget_left -= item.cost
        value += item.value
        depth += 1
    return value


def unbounded_upper_bound(sorted_items, depth, value, budget_left):
    """
    Upper bound on the value reachable from `depth` when items may be reused.

    Takes as many whole units of the item at `depth` as fit, then fills what
    is left at the ratio of the next item. Walking further with whole units
    (as `upper_bound` does) would not be safe: an optimal packing may take one
    unit less of the best item so that the next one fits exactly, and a greedy
    walk can then end below the optimum.

    Zero-cost items are not allowed here (they would be taken infinitely often).
    """
    n = len(sorted_items)
    if depth >= n:
        return value
    item = sorted_items[depth][0]
    units = budget_left // item.cost
    budget_left -= units * item.cost
    value += units * item.value
    if depth + 1 < n:
        nxt = sorted_items[depth + 1][0]
        value += divide(budget_left * nxt.value, nxt.cost)
    return value
