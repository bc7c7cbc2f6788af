import numpy as np

from .instance import ProblemInstance

CORRELATION_TYPES = ('uncorrelated', 'weakly_correlated', 'strongly_correlated')


def generate_instance(num_items, correlation_type='uncorrelated', rng=None,
                      max_weight=100, capacity_ratio=0.4):
    """
    Generates a single 0/1 knapsack problem instance.

    Args:
        num_items (int): The number of items in the problem.
        correlation_type (str): The relationship between weights and values.
            - 'uncorrelated': Weights and values are independent.
            - 'weakly_correlated': Value is based on weight with large noise.
            - 'strongly_correlated': Value is based on weight with small noise.
        rng: a ``numpy.random.Generator`` or a seed; a fresh generator if None.
        max_weight (int): weights are drawn from [1, max_weight).
        capacity_ratio (float): capacity as a fraction of the total weight.

    Returns:
        ProblemInstance: items in generation order (not sorted by ratio).
    """
    rng = np.random.default_rng(rng)
    weights = rng.integers(1, max_weight, size=num_items)

    if correlation_type == 'uncorrelated':
        values = rng.integers(1, max_weight, size=num_items)
    elif correlation_type == 'weakly_correlated':
        # Values are based on weights with a large random component
        noise = rng.integers(-max_weight // 4, max_weight // 4, size=num_items)
        values = np.maximum(1, weights + noise)
    elif correlation_type == 'strongly_correlated':
        # Values are tightly linked to weights plus a small random component
        noise = rng.integers(-5, 5, size=num_items)
        values = np.maximum(1, weights + noise)
    else:
        raise ValueError(f"Invalid correlation type: {correlation_type!r}")

    # 40% of the total weight by default; usually a non-trivial problem
    capacity = int(np.sum(weights) * capacity_ratio)
    return ProblemInstance.from_arrays(weights.tolist(), values.tolist(), capacity)


def generate_instances(num_instances, num_items, rng=None, **kwargs):
    """Instances cycling through the correlation types, for a diverse set."""
    rng = np.random.default_rng(rng)
    return [
        generate_instance(num_items, CORRELATION_TYPES[i % len(CORRELATION_TYPES)], rng, **kwargs)
        for i in range(num_instances)
    ]
