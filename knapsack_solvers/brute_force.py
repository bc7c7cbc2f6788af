"""
Exhaustive enumeration of every subset, used as the ground truth for small n.
"""

import logging
from itertools import combinations

from .instance import as_instance

logger = logging.getLogger(__name__)


class BruteForceSolver:
    """
    Enumerates every k-combination of items for k = 1..n and keeps the
    feasible one with the largest profit. Ties go to the first combination
    found. O(2^n), so only for small instances. Item order does not matter.
    """

    def __init__(self, instance):
        self.instance = instance
        self.best_profit = 0.0
        self.best_combination = ()
        self.examined = 0

    def _scan(self, k):
        weights, profits = self.instance.weights, self.instance.profits
        capacity = self.instance.capacity
        for comb in combinations(range(self.instance.n), k):
            self.examined += 1
            weight = sum(weights[i] for i in comb)
            if weight > capacity:
                continue
            profit = sum(profits[i] for i in comb)
            if profit > self.best_profit:
                self.best_profit = profit
                self.best_combination = comb

    def solve(self):
        for k in range(1, self.instance.n + 1):
            self._scan(k)
        logger.debug("brute force examined %d subsets, best profit %s",
                     self.examined, self.best_profit)
        return self.instance.solution(self.best_combination, iterations=self.examined)


def brute_force_max_profit(items, capacity=None):
    """Maximum profit over all feasible subsets; 0 when nothing fits."""
    return BruteForceSolver(as_instance(items, capacity)).solve().profit
