"""
Horowitz-Sahni branch-and-bound for the 0/1 knapsack problem (Martello & Toth, pp. 30-32).

Items must be in descending profit/weight order. The search alternates

  forward move:  insert the largest run of consecutive items that fit, then
                 mark the first one that does not fit as excluded;
  bound check:   compare the incumbent with the current profit plus the
                 continuous-relaxation bound of the items still to decide;
  backtrack:     remove the last inserted item and resume after it.

When the cursor runs past the last item the current solution is complete
and may replace the incumbent. The search ends when no inserted item is left
to remove.
"""

import logging
import math

from .instance import (
    SolverInvariantError,
    as_instance,
    best_single_fit,
    require_ratio_order,
)

logger = logging.getLogger(__name__)

# Boundary sentinel stored at index n: it never fits and adds nothing to a bound.
SENTINEL_WEIGHT = math.inf
SENTINEL_PROFIT = 0.0


class HorowitzSahniSolver:

    def __init__(self, instance):
        require_ratio_order(instance, "HorowitzSahniSolver")
        self.instance = instance
        self.n = instance.n
        self.w = list(instance.weights) + [SENTINEL_WEIGHT]
        self.p = list(instance.profits) + [SENTINEL_PROFIT]

        self.z = 0.0
        self.x = [0] * self.n
        self.zh = 0.0
        self.xh = [0] * self.n
        self.c_hat = instance.capacity
        self.j = 0
        self.bound_evaluations = 0
        self.incumbent_updates = 0

    def upper_bound(self):
        """Continuous-relaxation bound of items j..n-1 with capacity c_hat."""
        w, p = self.w, self.p
        w_sum, p_sum = 0, 0.0
        r = self.j
        while w_sum + w[r] <= self.c_hat:
            w_sum += w[r]
            p_sum += p[r]
            r += 1
        return p_sum + (self.c_hat - w_sum) * (p[r] / w[r])

    def _bound_check(self):
        self.bound_evaluations += 1
        if self.z >= self.zh + self.upper_bound():
            return self._backtrack
        return self._forward

    def _forward(self):
        w, p, n = self.w, self.p, self.n
        while w[self.j] <= self.c_hat:
            self.c_hat -= w[self.j]
            self.zh += p[self.j]
            self.xh[self.j] = 1
            self.j += 1
        if self.j < n:
            self.xh[self.j] = 0
            self.j += 1
        if self.j < n - 1:
            return self._bound_check
        if self.j == n - 1:
            return self._forward
        return self._update

    def _update(self):
        n = self.n
        if self.zh > self.z:
            self.z = self.zh
            self.x = list(self.xh)
            self.incumbent_updates += 1
            logger.debug("new incumbent %s after %d bound evaluations",
                         self.z, self.bound_evaluations)
        self.j = n - 1
        if self.xh[n - 1] == 1:
            self.c_hat += self.w[n - 1]
            self.zh -= self.p[n - 1]
            self.xh[n - 1] = 0
        return self._backtrack

    def _backtrack(self):
        if not 0 <= self.j <= self.n:
            raise SolverInvariantError(f"search cursor out of range: j={self.j}, n={self.n}")
        i = self.j - 1
        while i >= 0 and self.xh[i] == 0:
            i -= 1
        if i < 0:
            return None
        self.c_hat += self.w[i]
        self.zh -= self.p[i]
        self.xh[i] = 0
        self.j = i + 1
        return self._bound_check

    def search(self):
        """Run the branch-and-bound search alone and return the incumbent."""
        if self.n > 0:
            step = self._bound_check
            while step is not None:
                step = step()
        selected = [i for i in range(self.n) if self.x[i] == 1]
        logger.debug("search done: z=%s, %d bound evaluations, %d incumbent updates",
                     self.z, self.bound_evaluations, self.incumbent_updates)
        return self.instance.solution(selected, iterations=self.bound_evaluations)

    def solve(self):
        """
        Search, then add the most profitable unselected item that still fits.

        The search is exact, so the add-on step finds nothing to add on a
        correct run; it is kept as a final feasibility-preserving pass.
        """
        found = self.search()
        room = self.instance.capacity - found.weight
        unselected = set(range(self.n)) - set(found.selected)
        leftover = best_single_fit(self.instance, unselected, room)
        if leftover is None:
            return found
        logger.warning("exact search left item %d unused with room %d", leftover, room)
        return self.instance.solution(found.selected + (leftover,), iterations=found.iterations)


def horowitz_sahni_max_profit(items, capacity=None):
    """Optimal profit; items must be in descending profit/weight order."""
    return HorowitzSahniSolver(as_instance(items, capacity)).solve().profit
