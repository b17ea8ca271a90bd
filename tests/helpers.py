"""Brute-force references used by the tests."""

import itertools


def brute_force_01(values, costs, budget):
    best = 0
    for pick in itertools.product((0, 1), repeat=len(values)):
        cost = sum(p * c for p, c in zip(pick, costs))
        if cost <= budget:
            best = max(best, sum(p * v for p, v in zip(pick, values)))
    return best


def brute_force_unbounded(values, costs, budget):
    ranges = [range(int(budget // c) + 1) if c > 0 else range(1) for c in costs]
    best = 0
    for pick in itertools.product(*ranges):
        cost = sum(p * c for p, c in zip(pick, costs))
        if cost <= budget:
            best = max(best, sum(p * v for p, v in zip(pick, values)))
    return best
