import numpy as np

from knapsack_solvers import ProblemInstance, generate_instance


def random_instances(count, max_items=12, seed=1234, real_profits=False):
    """Seeded small instances, unsorted; integer profits unless ``real_profits``."""
    rng = np.random.default_rng(seed)
    instances = []
    for k in range(count):
        n = int(rng.integers(0, max_items + 1))
        if real_profits:
            weights = rng.integers(1, 40, size=n).tolist()
            profits = rng.uniform(0.5, 50.0, size=n).tolist()
            capacity = int(rng.integers(0, sum(weights) + 2))
            instances.append(ProblemInstance.from_arrays(weights, profits, capacity))
        else:
            corr = ('uncorrelated', 'weakly_correlated', 'strongly_correlated')[k % 3]
            instances.append(generate_instance(n, corr, rng))
    return instances


def sorted_instances(*args, **kwargs):
    return [instance.sorted_by_ratio()[0] for instance in random_instances(*args, **kwargs)]
