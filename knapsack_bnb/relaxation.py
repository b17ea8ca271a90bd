"""
Linear-programming relaxation of the 0/1 knapsack, solved with scipy.

Independent of the search code; used to cross-check the fractional bound and
to report the root gap in benchmarks.
"""

import numpy as np
from scipy.optimize import linprog


def lp_relaxation_bound(instance):
    """
    Optimal value of max c.x s.t. w.x <= budget, 0 <= x <= 1.

    Returns 0.0 for an instance without items.
    """
    n = len(instance)
    if n == 0:
        return 0.0
    c = np.array([float(it.value) for it in instance])
    A_ub = np.array([[float(it.cost) for it in instance]])
    b_ub = [float(instance.budget)]
    # linprog minimizes, so negate the objective
    res = linprog(-c, A_ub=A_ub, b_ub=b_ub, bounds=[(0, 1)] * n, method='highs')
    if not res.success:
        raise RuntimeError(f"LP relaxation failed: {res.message}")
    return -res.fun
