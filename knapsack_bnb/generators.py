"""
Random knapsack instances and pickled datasets of them.

Instances are stored on disk as plain dicts so other tools can read them:
    {'weights': [...], 'values': [...], 'capacity': int, 'num_items': int}
"""

import os
import pickle

import numpy as np

from .errors import InvalidInstance
from .instance import Instance

CORRELATION_TYPES = ('uncorrelated', 'weakly_correlated', 'strongly_correlated')


def generate_knapsack_instance(num_items, correlation_type='uncorrelated',
                               capacity_ratio=0.4, seed=None):
    """
    Generates a single knapsack instance with integer values and costs.

    Args:
        num_items (int): The number of items in the problem.
        correlation_type (str): The relationship between costs and values.
            - 'uncorrelated': Costs and values are independent.
            - 'weakly_correlated': Value is based on cost with large noise.
            - 'strongly_correlated': Value is based on cost with small noise.
        capacity_ratio (float): Budget as a fraction of the total cost.
        seed (int | None): Seed for the random generator.

    Returns:
        Instance
    """
    rng = np.random.RandomState(seed)
    weights = rng.randint(1, 100, size=num_items)

    if correlation_type == 'uncorrelated':
        values = rng.randint(1, 100, size=num_items)
    elif correlation_type == 'weakly_correlated':
        noise = rng.randint(-25, 25, size=num_items)
        values = np.maximum(1, weights + noise)
    elif correlation_type == 'strongly_correlated':
        noise = rng.randint(-5, 5, size=num_items)
        values = np.maximum(1, weights + noise)
    else:
        raise ValueError(f"Invalid correlation type: {correlation_type!r}")

    # 40% of the total weight usually gives non-trivial problems
    capacity = int(np.sum(weights) * capacity_ratio)

    return Instance.from_lists(values.tolist(), weights.tolist(), capacity)


def instance_to_dict(instance):
    return {
        'weights': [it.cost for it in instance],
        'values': [it.value for it in instance],
        'capacity': instance.budget,
        'num_items': len(instance),
    }


def instance_from_dict(data):
    try:
        return Instance.from_lists(data['values'], data['weights'], data['capacity'])
    except (KeyError, TypeError) as e:
        raise InvalidInstance(f"malformed instance record: {e}") from e


def save_instance(instance, path):
    with open(path, 'wb') as f:
        pickle.dump(instance_to_dict(instance), f)


def load_instance(path):
    with open(path, 'rb') as f:
        data = pickle.load(f)
    return instance_from_dict(data)


def generate_dataset(directory, num_instances, num_items, seed=0):
    """
    Write `num_instances` instances as instance_{i}.pkl into `directory`,
    cycling through the correlation types. Returns the written paths.
    """
    os.makedirs(directory, exist_ok=True)
    paths = []
    for i in range(num_instances):
        corr_type = CORRELATION_TYPES[i % len(CORRELATION_TYPES)]
        instance = generate_knapsack_instance(num_items, corr_type, seed=seed + i)
        path = os.path.join(directory, f'instance_{i}.pkl')
        save_instance(instance, path)
        paths.append(path)
    return paths
