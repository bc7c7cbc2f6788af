import pytest

from knapsack_solvers import ProblemInstance


@pytest.fixture
def textbook():
    """Three items, capacity 50: the optimum is items 1 and 2 for a profit of 220."""
    return ProblemInstance([(10, 60), (20, 100), (30, 120)], 50)
