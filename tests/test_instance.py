import dataclasses

import numpy as np
import pytest

from knapsack_solvers import InvalidInstance, Item, ProblemInstance, Transaction
from knapsack_solvers.instance import as_instance, best_single_fit


@pytest.mark.parametrize("weight, profit", [
    (0, 1.0),
    (-3, 1.0),
    (2.5, 1.0),
    (True, 1.0),
    ("4", 1.0),
    (4, -0.5),
    (4, float("nan")),
    (4, "1"),
])
def test_item_rejects_bad_values(weight, profit):
    with pytest.raises(InvalidInstance):
        Item(weight, profit)


def test_item_normalizes_numbers():
    item = Item(np.int64(4), 3)
    assert type(item.weight) is int
    assert type(item.profit) is float
    assert Item(6.0, 3).weight == 6
    assert item.ratio == 0.75


def test_item_is_frozen():
    item = Item(4, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.weight = 5


@pytest.mark.parametrize("capacity", [-1, 2.5, None, "10"])
def test_instance_rejects_bad_capacity(capacity):
    with pytest.raises(InvalidInstance):
        ProblemInstance([(1, 1)], capacity)


def test_instance_rejects_malformed_items():
    with pytest.raises(InvalidInstance):
        ProblemInstance([(1, 2, 3)], 10)
    with pytest.raises(InvalidInstance):
        ProblemInstance([5], 10)
    with pytest.raises(InvalidInstance):
        ProblemInstance.from_arrays([1, 2], [3], 10)


def test_instance_is_immutable(textbook):
    with pytest.raises(AttributeError):
        textbook.capacity = 10


def test_parallel_views(textbook):
    assert textbook.n == len(textbook) == 3
    assert textbook.weights == (10, 20, 30)
    assert textbook.profits == (60.0, 100.0, 120.0)
    np.testing.assert_allclose(textbook.ratios, [6.0, 5.0, 4.0])
    assert textbook.total_weight([1, 2]) == 50
    assert textbook.total_profit([1, 2]) == 220.0


def test_empty_instance():
    instance = ProblemInstance([], 7)
    assert instance.n == 0
    assert instance.is_ratio_sorted()
    ordered, order = instance.sorted_by_ratio()
    assert ordered.n == 0 and order == ()


def test_sorted_by_ratio_is_stable_and_reports_permutation():
    instance = ProblemInstance([(4, 4), (1, 3), (2, 2), (5, 20)], 6)
    assert not instance.is_ratio_sorted()
    ordered, order = instance.sorted_by_ratio()
    assert order == (3, 1, 0, 2)
    assert ordered.is_ratio_sorted()
    assert [instance.items[i] for i in order] == list(ordered.items)
    assert ordered.capacity == 6


def test_dict_layout(textbook):
    d = textbook.to_dict()
    assert d == {'weights': [10, 20, 30], 'values': [60.0, 100.0, 120.0],
                 'capacity': 50, 'num_items': 3}
    assert ProblemInstance.from_dict(d) == textbook


def test_from_dict_checks_layout():
    with pytest.raises(InvalidInstance):
        ProblemInstance.from_dict({'weights': [1], 'capacity': 3})
    with pytest.raises(InvalidInstance):
        ProblemInstance.from_dict({'weights': [1], 'values': [1], 'capacity': 3, 'num_items': 2})


def test_from_transactions():
    txs = [Transaction(1, 300, 0.5), Transaction(2, 100, 0.25)]
    instance = ProblemInstance.from_transactions(txs, 350)
    assert instance.weights == (300, 100)
    assert instance.profits == (0.5, 0.25)
    assert ProblemInstance(txs, 350) == instance


def test_as_instance():
    instance = ProblemInstance([(1, 1)], 3)
    assert as_instance(instance) is instance
    assert as_instance(instance, 5).capacity == 5
    assert as_instance([(1, 1)], 3) == instance
    with pytest.raises(InvalidInstance):
        as_instance([(1, 1)])


def test_best_single_fit():
    instance = ProblemInstance([(5, 10), (3, 7), (3, 7), (1, 0)], 10)
    assert best_single_fit(instance, range(4), 10) == 0
    assert best_single_fit(instance, range(4), 4) == 1
    assert best_single_fit(instance, [3], 10) is None
    assert best_single_fit(instance, range(4), 0) is None


def test_solution_packaging(textbook):
    solution = textbook.solution({2, 1}, iterations=4)
    assert solution.selected == (1, 2)
    assert solution.profit == 220.0
    assert solution.weight == 50
    assert solution.iterations == 4
