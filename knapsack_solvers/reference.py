"""
Independent reference values computed with off-the-shelf solvers.

* ``lp_relaxation_bound``: the continuous relaxation solved with scipy's
  HiGHS backend. Items heavier than the capacity are fixed to 0, which is
  the relaxation the critical-item search works with.
* ``scip_max_profit``: the exact integer optimum from SCIP. pyscipopt is an
  optional dependency (``pip install knapsack-solvers[scip]``).
"""

import logging

import numpy as np
from scipy.optimize import linprog

from .instance import as_instance

logger = logging.getLogger(__name__)


def lp_relaxation_bound(items, capacity=None):
    instance = as_instance(items, capacity)
    if instance.n == 0:
        return 0.0
    weights = np.array(instance.weights, dtype=float)
    c_min = -np.array(instance.profits, dtype=float)
    bounds = [(0, 0) if w > instance.capacity else (0, 1) for w in instance.weights]
    res = linprog(c_min, A_ub=np.array([weights]), b_ub=[instance.capacity],
                  bounds=bounds, method='highs')
    if not res.success:
        raise RuntimeError(f"LP relaxation did not solve: {res.message}")
    return float(-res.fun)


def scip_max_profit(items, capacity=None, time_limit=None):
    """
    Solve the instance to optimality with SCIP and return the profit.

    Presolve, heuristics and cutting planes are switched off so SCIP runs a
    plain branch-and-bound, comparable to the solvers in this package.
    """
    from pyscipopt import Model, SCIP_PARAMSETTING

    instance = as_instance(items, capacity)
    if instance.n == 0:
        return 0.0

    model = Model("KnapsackReference")
    model.hideOutput()
    model.setPresolve(SCIP_PARAMSETTING.OFF)
    model.setHeuristics(SCIP_PARAMSETTING.OFF)
    model.setSeparating(SCIP_PARAMSETTING.OFF)
    if time_limit is not None:
        model.setParam("limits/time", time_limit)

    x = {i: model.addVar(vtype="B", name=f"x_{i}") for i in range(instance.n)}
    model.setObjective(sum(instance.profits[i] * x[i] for i in range(instance.n)), "maximize")
    model.addCons(sum(instance.weights[i] * x[i] for i in range(instance.n)) <= instance.capacity)

    model.optimize()
    status = model.getStatus()
    if status != "optimal":
        raise RuntimeError(f"SCIP could not find an optimal solution. Status: {status}")
    logger.debug("SCIP optimum %s after %d nodes", model.getObjVal(), model.getNNodes())
    return float(model.getObjVal())
