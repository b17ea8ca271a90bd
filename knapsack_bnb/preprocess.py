"""
Preprocessing: drop items that can never help, order the rest by ratio.
"""

import logging

logger = logging.getLogger(__name__)


def prepare_items(instance):
    """
    Return the usable items of `instance` as (item, original_index) pairs,
    best ratio first.

    Dropped before sorting:
      - items costing more than the whole budget (they can never be taken)
      - items with value <= 0 (taking them never improves a selection, and
        they would make the greedy bound undercount)

    The sort is stable, so items with equal ratio keep their instance order.
    """
    budget = instance.budget
    pairs = [(it, i) for i, it in enumerate(instance)
             if it.cost <= budget and it.value > 0]
    pairs.sort(key=lambda p: p[0].ratio, reverse=True)
    logger.debug("preprocess: kept %d of %d items (budget=%r)",
                 len(pairs), len(instance), budget)
    return pairs
