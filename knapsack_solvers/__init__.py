from .instance import (
    InvalidInstance,
    Item,
    KnapsackSolution,
    ProblemInstance,
    SolverInvariantError,
    Transaction,
)
from .brute_force import BruteForceSolver, brute_force_max_profit
from .critical_item import CriticalItemSolver, critical_item_max_profit
from .horowitz_sahni import HorowitzSahniSolver, horowitz_sahni_max_profit
from .generate import CORRELATION_TYPES, generate_instance, generate_instances
from .reference import lp_relaxation_bound, scip_max_profit
from .compare import compare_solvers, run_experiment, summarize

__all__ = [
    "InvalidInstance",
    "Item",
    "KnapsackSolution",
    "ProblemInstance",
    "SolverInvariantError",
    "Transaction",
    "BruteForceSolver",
    "brute_force_max_profit",
    "CriticalItemSolver",
    "critical_item_max_profit",
    "HorowitzSahniSolver",
    "horowitz_sahni_max_profit",
    "CORRELATION_TYPES",
    "generate_instance",
    "generate_instances",
    "lp_relaxation_bound",
    "scip_max_profit",
    "compare_solvers",
    "run_experiment",
    "summarize",
]
