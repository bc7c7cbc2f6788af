"""
Run the three solvers on the same instances and tabulate what they report.

The caller's instance can be in any order: the brute-force solver gets it as
given and the two ratio-ordered solvers get ``sorted_by_ratio()``.
"""

import logging
import time

import pandas as pd

from .brute_force import BruteForceSolver
from .critical_item import CriticalItemSolver
from .horowitz_sahni import HorowitzSahniSolver
from .instance import as_instance
from .reference import lp_relaxation_bound, scip_max_profit

logger = logging.getLogger(__name__)

SOLVERS = {
    'brute_force': (BruteForceSolver, False),
    'horowitz_sahni': (HorowitzSahniSolver, True),
    'critical_item': (CriticalItemSolver, True),
}

# Above this many items the 2^n enumeration is skipped.
BRUTE_FORCE_LIMIT = 20

COLUMNS = ['solver', 'profit', 'weight', 'iterations', 'time_s']


def _timed(fn):
    start_t = time.perf_counter()
    result = fn()
    return result, time.perf_counter() - start_t


def compare_solvers(items, capacity=None, brute_force_limit=BRUTE_FORCE_LIMIT,
                    with_scip=False):
    """
    Solve one instance with every solver.

    Returns:
        pandas.DataFrame: one row per solver with its profit, the weight of
        the subset it chose, its work counter and wall time. The LP relaxation
        bound (and the SCIP optimum when ``with_scip``) are added as extra rows
        with no weight or iteration count.
    """
    instance = as_instance(items, capacity)
    ordered, _ = instance.sorted_by_ratio()
    rows = []

    for name, (solver_cls, needs_order) in SOLVERS.items():
        if name == 'brute_force' and instance.n > brute_force_limit:
            logger.info("skipping brute force for n=%d > %d", instance.n, brute_force_limit)
            continue
        target = ordered if needs_order else instance
        solution, elapsed = _timed(lambda: solver_cls(target).solve())
        rows.append({
            'solver': name,
            'profit': solution.profit,
            'weight': solution.weight,
            'iterations': solution.iterations,
            'time_s': elapsed,
        })

    references = [('lp_bound', lp_relaxation_bound)]
    if with_scip:
        references.append(('scip', scip_max_profit))
    for name, fn in references:
        profit, elapsed = _timed(lambda: fn(instance))
        rows.append({'solver': name, 'profit': profit, 'weight': float('nan'),
                     'iterations': float('nan'), 'time_s': elapsed})

    return pd.DataFrame(rows, columns=COLUMNS)


def run_experiment(instances, brute_force_limit=BRUTE_FORCE_LIMIT, with_scip=False):
    """Long-form results over many instances, with an ``instance`` column and the gap to the best profit."""
    frames = []
    for k, instance in enumerate(instances, start=1):
        logger.info("instance #%d: n=%d capacity=%d", k, instance.n, instance.capacity)
        df = compare_solvers(instance, brute_force_limit=brute_force_limit, with_scip=with_scip)
        df.insert(0, 'instance', k)
        best = df.loc[df['solver'] != 'lp_bound', 'profit'].max()
        df['gap'] = best - df['profit']
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=['instance'] + COLUMNS + ['gap'])
    return pd.concat(frames, ignore_index=True)


def summarize(results):
    """Per-solver averages of profit, gap, iterations and time."""
    return (results.groupby('solver', sort=False)
            .agg(mean_profit=('profit', 'mean'),
                 mean_gap=('gap', 'mean'),
                 optimal=('gap', lambda g: int((g <= 1e-9).sum())),
                 mean_iterations=('iterations', 'mean'),
                 mean_time_s=('time_s', 'mean'))
            .reset_index())
