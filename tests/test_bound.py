import math
from fractions import Fraction

import numpy as np
import pytest

from knapsack_bnb import Instance, prepare_items, solve, upper_bound, unbounded_upper_bound
from knapsack_bnb.generators import generate_knapsack_instance
from knapsack_bnb.relaxation import lp_relaxation_bound

from .helpers import brute_force_01, brute_force_unbounded


def suffix_lists(sorted_items, depth):
    values = [it.value for it, _ in sorted_items[depth:]]
    costs = [it.cost for it, _ in sorted_items[depth:]]
    return values, costs


def test_fractional_bound_classic_example():
    inst = Instance.from_lists([60, 100, 120], [10, 20, 30], 50)
    items = prepare_items(inst)
    # 60 + 100 + 20/30 * 120
    assert upper_bound(items, 0, 0, 50) == pytest.approx(240)
    assert upper_bound(items, 1, 60, 40) == pytest.approx(60 + 100 + 80)
    assert upper_bound(items, 3, 220, 0) == 220


def test_bound_when_everything_fits():
    inst = Instance.from_lists([1, 2, 3], [1, 1, 1], 10)
    assert upper_bound(prepare_items(inst), 0, 0, 10) == 6


def test_bound_with_free_item_and_no_budget():
    inst = Instance.from_lists([5, 7], [0, 3], 3)
    items = prepare_items(inst)
    bound = upper_bound(items, 0, 0, 0)
    assert not math.isnan(bound)
    assert bound == 5


def test_unbounded_bound_classic_example():
    inst = Instance.from_lists([60, 100, 120], [10, 20, 30], 50)
    items = prepare_items(inst)
    assert unbounded_upper_bound(items, 0, 0, 50) == 300
    # 2 units of (100, 20), then 10 left at ratio 4
    assert unbounded_upper_bound(items, 1, 0, 50) == pytest.approx(200 + 40)
    assert unbounded_upper_bound(items, 3, 7, 50) == 7


def test_unbounded_bound_covers_taking_one_unit_less():
    # greedily: 1 x (1000, 100), 1 x (594, 60) = 1594 with 20 left,
    # but 3 x (594, 60) = 1782 fits exactly.
    inst = Instance.from_lists([1000, 594, 1], [100, 60, 170], 180)
    items = prepare_items(inst)
    assert brute_force_unbounded([1000, 594, 1], [100, 60, 170], 180) == 1782
    assert unbounded_upper_bound(items, 0, 0, 180) >= 1782
    assert solve(inst, unbounded=True).value == 1782


@pytest.mark.parametrize("seed", range(8))
def test_bound_is_sound_against_brute_force(seed):
    rng = np.random.RandomState(seed)
    values = rng.randint(1, 60, size=9).tolist()
    costs = rng.randint(1, 30, size=9).tolist()
    budget = int(sum(costs) * 0.5)
    items = prepare_items(Instance.from_lists(values, costs, budget))
    for depth in range(len(items) + 1):
        for budget_left in (0, 7, budget // 2, budget):
            sv, sc = suffix_lists(items, depth)
            assert upper_bound(items, depth, 0, budget_left) >= brute_force_01(sv, sc, budget_left) - 1e-9


@pytest.mark.parametrize("seed", range(8))
def test_unbounded_bound_is_sound_against_brute_force(seed):
    rng = np.random.RandomState(100 + seed)
    values = rng.randint(1, 40, size=4).tolist()
    costs = rng.randint(5, 20, size=4).tolist()
    budget = 40
    items = prepare_items(Instance.from_lists(values, costs, budget))
    for depth in range(len(items) + 1):
        for budget_left in (0, 5, 17, budget):
            sv, sc = suffix_lists(items, depth)
            assert (unbounded_upper_bound(items, depth, 0, budget_left)
                    >= brute_force_unbounded(sv, sc, budget_left) - 1e-9)


@pytest.mark.parametrize("corr_type", ["uncorrelated", "weakly_correlated", "strongly_correlated"])
def test_root_bound_matches_lp_relaxation(corr_type):
    inst = generate_knapsack_instance(25, corr_type, seed=3)
    items = prepare_items(inst)
    bound = upper_bound(items, 0, 0, inst.budget)
    lp = lp_relaxation_bound(inst)
    # the LP may also take a fraction of an item that alone exceeds the budget
    assert bound <= lp + 1e-6
    if all(it.cost <= inst.budget for it in inst):
        assert bound == pytest.approx(lp, rel=1e-7)


def test_lp_relaxation_of_empty_instance():
    assert lp_relaxation_bound(Instance(10)) == 0.0


def test_integer_bound_is_exact():
    big = 2 ** 60
    inst = Instance.from_lists([4 * big, big + 2, 3 * big + 1], [4, 1, 3], 6)
    items = prepare_items(inst)
    # ratio order: (big + 2, 1), (3 * big + 1, 3), (4 * big, 4)
    assert [i for _, i in items] == [1, 2, 0]
    # the first two fit, then half of (4 * big, 4)
    assert upper_bound(items, 0, 0, 6) == 6 * big + 3
    assert upper_bound(items, 2, 0, 3) == Fraction(3 * big, 1)
    # 6 units of (big + 2, 1) use the whole budget
    assert unbounded_upper_bound(items, 0, 0, 6) == 6 * (big + 2)
