from itertools import product

import pytest

from knapsack_solvers import BruteForceSolver, ProblemInstance, brute_force_max_profit

from .instances import random_instances


def exhaustive_optimum(instance):
    """Independent check: walk every 0/1 vector instead of every combination."""
    best = 0.0
    for bits in product((0, 1), repeat=instance.n):
        weight = sum(w for w, b in zip(instance.weights, bits) if b)
        if weight <= instance.capacity:
            best = max(best, sum(p for p, b in zip(instance.profits, bits) if b))
    return best


def test_textbook_instance(textbook):
    solution = BruteForceSolver(textbook).solve()
    assert solution.profit == 220.0
    assert solution.selected == (1, 2)
    assert solution.weight == 50
    assert solution.iterations == 7


def test_item_order_does_not_matter(textbook):
    reversed_items = ProblemInstance(list(reversed(textbook.items)), textbook.capacity)
    assert brute_force_max_profit(reversed_items) == 220.0
    assert brute_force_max_profit(textbook.items, 50) == 220.0


def test_nothing_fits():
    assert brute_force_max_profit([(5, 10)], 4) == 0.0
    assert BruteForceSolver(ProblemInstance([(5, 10)], 4)).solve().selected == ()


def test_zero_capacity():
    assert brute_force_max_profit([(1, 3), (2, 4), (3, 9)], 0) == 0.0


def test_empty_instance():
    solution = BruteForceSolver(ProblemInstance([], 10)).solve()
    assert solution.profit == 0.0
    assert solution.iterations == 0


def test_duplicate_items():
    assert brute_force_max_profit([(10, 10), (10, 10)], 10) == 10.0


def test_ties_keep_first_found():
    solution = BruteForceSolver(ProblemInstance([(5, 10), (5, 10), (2, 4), (3, 6)], 5)).solve()
    assert solution.selected == (0,)


@pytest.mark.parametrize("instance", random_instances(25, max_items=10, seed=7))
def test_matches_independent_enumeration(instance):
    assert brute_force_max_profit(instance) == pytest.approx(exhaustive_optimum(instance))


def test_repeated_solves_agree(textbook):
    first = BruteForceSolver(textbook).solve()
    assert all(BruteForceSolver(textbook).solve() == first for _ in range(3))
