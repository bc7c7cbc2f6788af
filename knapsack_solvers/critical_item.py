"""
Critical-item heuristic for the 0/1 knapsack problem (Martello & Toth, pp. 16-19).

The continuous relaxation of the knapsack problem is solved by taking items in
descending profit/weight order until the next one, the critical item, no
longer fits. Instead of sorting, the critical item is located by repeatedly
partitioning the undecided items around the median of their ratios:

    J1  items known to be in the relaxed optimum
    J0  items known to be out of it
    JC  items still undecided

Once the partition is final, an integer solution is read off J1 and the
undecided items, and completed with the best single item that still fits.
The result is feasible and at least half the optimum, but not always optimal.

Ratio ties are detected with exact float equality: two items share a ratio
only when ``profit / weight`` evaluates to the same double.
"""

import logging

import numpy as np

from .instance import (
    SolverInvariantError,
    as_instance,
    best_single_fit,
    require_ratio_order,
)

logger = logging.getLogger(__name__)


class CriticalItemSolver:

    def __init__(self, instance):
        require_ratio_order(instance, "CriticalItemSolver")
        self.instance = instance
        self.ratios = instance.ratios
        self.J1 = set()
        self.J0 = set()
        self.JC = set(range(instance.n))
        self.c_remaining = instance.capacity
        self.rounds = 0
        self.critical = None
        self.relaxation_bound = None

    def _weight(self, indices):
        return sum(self.instance.weights[j] for j in indices)

    def _check_partition(self):
        n = self.instance.n
        J1, J0, JC = self.J1, self.J0, self.JC
        if len(J1) + len(J0) + len(JC) != n or (J1 | J0 | JC) != set(range(n)):
            raise SolverInvariantError(
                f"partition lost its shape: |J1|={len(J1)} |J0|={len(J0)} |JC|={len(JC)} n={n}"
            )
        if self.c_remaining < 0:
            raise SolverInvariantError(f"residual capacity went negative: {self.c_remaining}")

    def find_critical_item(self):
        """
        Shrink JC around the median ratio until the critical partition is found.

        On return JC holds the items whose ratio equals the critical ratio
        (empty when every item fits) and c_remaining is the capacity left
        after J1.
        """
        # Heavier than the whole knapsack: out of every solution.
        oversize = {j for j in self.JC if self.instance.weights[j] > self.instance.capacity}
        self.J0 |= oversize
        self.JC -= oversize

        while self.JC:
            self.rounds += 1
            candidates = sorted(self.JC)
            lam = float(np.median(self.ratios[candidates]))

            G = {j for j in candidates if self.ratios[j] > lam}
            L = {j for j in candidates if self.ratios[j] < lam}
            E = {j for j in candidates if self.ratios[j] == lam}

            c1 = self._weight(G)
            c2 = c1 + self._weight(E)
            logger.debug("round %d: |JC|=%d lambda=%.6g c1=%d c2=%d c=%d",
                         self.rounds, len(candidates), lam, c1, c2, self.c_remaining)

            if c1 <= self.c_remaining < c2:
                self.J1 |= G
                self.J0 |= L
                self.JC = E
                self.c_remaining -= c1
                self._check_partition()
                return

            if c1 > self.c_remaining:
                self.J0 |= L | E
                self.JC = G
            else:
                self.J1 |= G | E
                self.JC = L
                self.c_remaining -= c2

            if len(self.JC) >= len(candidates):
                raise SolverInvariantError(
                    f"partition round {self.rounds} did not shrink JC ({len(candidates)} items)"
                )
            self._check_partition()

    def _relaxation_value(self):
        value = self.instance.total_profit(self.J1)
        if self.JC:
            value += self.ratios[min(self.JC)] * self.c_remaining
        return float(value)

    def solve(self):
        instance = self.instance
        self.find_critical_item()
        self.relaxation_bound = self._relaxation_value()

        order = sorted(self.JC)
        ws, sigma = 0, 0
        for e in order:
            ws += instance.weights[e]
            if ws > self.c_remaining:
                break
            sigma += 1
        if sigma < len(order):
            self.critical = order[sigma]

        accepted = self.J1 | set(order[:max(sigma - 1, 0)])
        room = instance.capacity - self._weight(accepted)
        if room < 0:
            raise SolverInvariantError(f"accepted set overflows the knapsack by {-room}")

        selected = set(accepted)
        leftover = best_single_fit(instance, set(range(instance.n)) - accepted, room)
        if leftover is not None:
            selected.add(leftover)

        # max(z', p_max): a lone heavy item can beat the greedy fill.
        single = best_single_fit(instance, range(instance.n), instance.capacity)
        if single is not None and instance.profits[single] > instance.total_profit(selected):
            selected = {single}

        logger.debug("critical item %s, sigma=%d, relaxation bound %s",
                     self.critical, sigma, self.relaxation_bound)
        return instance.solution(selected, iterations=self.rounds)


def critical_item_max_profit(items, capacity=None):
    """
    Profit of the critical-item heuristic; items must be in descending ratio order.

    Not guaranteed optimal: the value is at least half the true optimum.
    """
    return CriticalItemSolver(as_instance(items, capacity)).solve().profit
