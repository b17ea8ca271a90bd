import logging
import time

import pandas as pd

from knapsack_bnb import BranchAndBound, UnboundedBranchAndBound, SearchLimits, SearchLimitReached
from knapsack_bnb.generators import CORRELATION_TYPES, generate_knapsack_instance
from knapsack_bnb.relaxation import lp_relaxation_bound


def run_solver(solver, instance):
    """Returns (value, nodes, prunes, seconds); value is None if a limit was hit."""
    start_t = time.time()
    try:
        value = solver.solve(instance).value
    except SearchLimitReached:
        value = None
    return value, solver.stats.nodes, solver.stats.prunes, time.time() - start_t


if __name__ == '__main__':
    NUM_PROBLEMS = 5
    NUM_ITEMS = 40
    LIMITS = SearchLimits(node_limit=5_000_000, time_limit=60.0)

    logging.basicConfig(level=logging.WARNING)

    results = []
    print("Running benchmark: 0/1 vs unbounded branch and bound\n")

    for corr_type in CORRELATION_TYPES:
        for i in range(NUM_PROBLEMS):
            print(f"--- {corr_type} instance #{i+1} ---")
            instance = generate_knapsack_instance(NUM_ITEMS, corr_type, seed=i)

            lp_bound = lp_relaxation_bound(instance)
            value_01, nodes_01, prunes_01, time_01 = run_solver(BranchAndBound(LIMITS), instance)
            value_ub, nodes_ub, prunes_ub, time_ub = run_solver(UnboundedBranchAndBound(LIMITS), instance)

            results.append({
                'Correlation': corr_type,
                'ProblemID': i + 1,
                'LP_Bound': lp_bound,
                'Value_01': value_01,
                'Nodes_01': nodes_01,
                'Prunes_01': prunes_01,
                'Time_01_s': time_01,
                'Value_Unbounded': value_ub,
                'Nodes_Unbounded': nodes_ub,
                'Time_Unbounded_s': time_ub,
            })

    df = pd.DataFrame(results)
    df['Root_Gap_%'] = 100 * (df['LP_Bound'] - df['Value_01']) / df['LP_Bound']

    print("\n\n" + "="*80)
    print(" " * 30 + "BENCHMARK RESULTS")
    print("="*80)
    print(df.round(3).to_string(index=False))
    print("="*80)

    print("\n--- AVERAGES BY CORRELATION TYPE ---")
    summary = df.groupby('Correlation')[['Nodes_01', 'Time_01_s', 'Nodes_Unbounded', 'Time_Unbounded_s', 'Root_Gap_%']].mean()
    print(summary.round(3).to_string())
    unsolved = df['Value_01'].isna().sum() + df['Value_Unbounded'].isna().sum()
    if unsolved:
        print(f"\n{unsolved} solve(s) stopped at the search limits.")
