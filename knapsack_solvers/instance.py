"""
Problem data for the 0/1 knapsack solvers.

An instance is a read-only sequence of items plus an integer capacity. Items
are referred to by their position in that sequence, so the same index means
the same item in ``weights``, ``profits`` and ``ratios``.
"""

import numbers
from dataclasses import dataclass

import numpy as np


class InvalidInstance(ValueError):
    """Raised when an instance violates the input constraints."""


class SolverInvariantError(RuntimeError):
    """Raised when a solver's internal bookkeeping is inconsistent (a bug)."""


def _as_weight(value, label):
    if isinstance(value, bool):
        raise InvalidInstance(f"{label}: weight must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        weight = int(value)
    elif isinstance(value, numbers.Real) and float(value).is_integer():
        weight = int(value)
    else:
        raise InvalidInstance(f"{label}: weight must be an integer, got {value!r}")
    if weight <= 0:
        raise InvalidInstance(f"{label}: weight must be positive, got {weight}")
    return weight


def _as_profit(value, label):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInstance(f"{label}: profit must be a real number, got {value!r}")
    profit = float(value)
    if not np.isfinite(profit):
        raise InvalidInstance(f"{label}: profit must be finite, got {profit}")
    if profit < 0:
        raise InvalidInstance(f"{label}: profit must be >= 0, got {profit}")
    return profit


def _as_capacity(value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInstance(f"capacity must be an integer, got {value!r}")
    if not isinstance(value, numbers.Integral) and not float(value).is_integer():
        raise InvalidInstance(f"capacity must be an integer, got {value!r}")
    capacity = int(value)
    if capacity < 0:
        raise InvalidInstance(f"capacity must be >= 0, got {capacity}")
    return capacity


@dataclass(frozen=True)
class Item:
    """An item with a positive integer weight and a non-negative profit."""
    weight: int
    profit: float

    def __post_init__(self):
        object.__setattr__(self, "weight", _as_weight(self.weight, "Item"))
        object.__setattr__(self, "profit", _as_profit(self.profit, "Item"))

    @property
    def ratio(self):
        return self.profit / self.weight


@dataclass(frozen=True)
class Transaction:
    """A pending transaction competing for space in a block: size in bytes, fee paid."""
    id: int
    size: int
    fee: float

    def to_item(self):
        return Item(weight=self.size, profit=self.fee)


@dataclass(frozen=True)
class KnapsackSolution:
    """
    Result of one solve.

    Attributes:
        profit: total profit of the selected items.
        selected: indices of the selected items, ascending, into the instance
            the solver was given.
        weight: total weight of the selected items.
        iterations: solver-specific work counter (subsets examined, partition
            rounds or bound evaluations).
    """
    profit: float
    selected: tuple = ()
    weight: int = 0
    iterations: int = 0


def _coerce_item(obj, index):
    if isinstance(obj, Item):
        return obj
    if isinstance(obj, Transaction):
        return obj.to_item()
    try:
        weight, profit = obj
    except (TypeError, ValueError) as e:
        raise InvalidInstance(
            f"item {index}: expected an Item or a (weight, profit) pair, got {obj!r}"
        ) from e
    return Item(
        weight=_as_weight(weight, f"item {index}"),
        profit=_as_profit(profit, f"item {index}"),
    )


class ProblemInstance:
    """
    Immutable 0/1 knapsack instance.

    Args:
        items: sequence of ``Item`` objects or ``(weight, profit)`` pairs.
        capacity (int): non-negative knapsack capacity.
    """

    __slots__ = ("_items", "_capacity", "_weights", "_profits")

    def __init__(self, items, capacity):
        items = tuple(_coerce_item(obj, i) for i, obj in enumerate(items))
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_capacity", _as_capacity(capacity))
        object.__setattr__(self, "_weights", tuple(item.weight for item in items))
        object.__setattr__(self, "_profits", tuple(item.profit for item in items))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_arrays(cls, weights, profits, capacity):
        if len(weights) != len(profits):
            raise InvalidInstance(
                f"weights and profits differ in length ({len(weights)} != {len(profits)})"
            )
        return cls(list(zip(weights, profits)), capacity)

    @classmethod
    def from_transactions(cls, transactions, capacity):
        return cls([t.to_item() for t in transactions], capacity)

    @classmethod
    def from_dict(cls, instance):
        """Build an instance from the generator layout: weights, values, capacity."""
        try:
            weights, values, capacity = instance['weights'], instance['values'], instance['capacity']
        except KeyError as e:
            raise InvalidInstance(f"instance dict is missing key {e}") from e
        if 'num_items' in instance and instance['num_items'] != len(weights):
            raise InvalidInstance(
                f"num_items={instance['num_items']} but {len(weights)} weights given"
            )
        return cls.from_arrays(weights, values, capacity)

    def to_dict(self):
        return {
            'weights': list(self._weights),
            'values': list(self._profits),
            'capacity': self._capacity,
            'num_items': self.n,
        }

    @property
    def items(self):
        return self._items

    @property
    def capacity(self):
        return self._capacity

    @property
    def weights(self):
        return self._weights

    @property
    def profits(self):
        return self._profits

    @property
    def n(self):
        return len(self._items)

    @property
    def ratios(self):
        """Efficiency ratio profit/weight of every item, as a float array."""
        return np.array(self._profits, dtype=float) / np.array(self._weights, dtype=float)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other):
        if not isinstance(other, ProblemInstance):
            return NotImplemented
        return self._items == other._items and self._capacity == other._capacity

    def __hash__(self):
        return hash((self._items, self._capacity))

    def __repr__(self):
        return f"ProblemInstance(n={self.n}, capacity={self._capacity})"

    def is_ratio_sorted(self):
        """True when items are in non-increasing order of profit/weight."""
        if self.n < 2:
            return True
        return bool(np.all(np.diff(self.ratios) <= 0))

    def sorted_by_ratio(self):
        """
        Return a copy sorted by descending efficiency ratio and the permutation used.

        Ties keep their original relative order. ``order[k]`` is the index in
        this instance of item ``k`` of the sorted copy.
        """
        order = np.argsort(-self.ratios, kind="stable")
        ordered = ProblemInstance([self._items[i] for i in order], self._capacity)
        return ordered, tuple(int(i) for i in order)

    def total_weight(self, indices):
        return sum(self._weights[i] for i in indices)

    def total_profit(self, indices):
        return float(sum(self._profits[i] for i in indices))

    def solution(self, indices, iterations=0):
        """Package a set of item indices as a KnapsackSolution."""
        selected = tuple(sorted(indices))
        return KnapsackSolution(
            profit=self.total_profit(selected),
            selected=selected,
            weight=self.total_weight(selected),
            iterations=iterations,
        )


def as_instance(items, capacity=None):
    """Accept a ProblemInstance, or items plus a capacity, and return an instance."""
    if isinstance(items, ProblemInstance):
        if capacity is not None and _as_capacity(capacity) != items.capacity:
            return ProblemInstance(items.items, capacity)
        return items
    if capacity is None:
        raise InvalidInstance("capacity is required when items are not a ProblemInstance")
    return ProblemInstance(items, capacity)


def require_ratio_order(instance, solver_name):
    if not instance.is_ratio_sorted():
        raise InvalidInstance(
            f"{solver_name} requires items in descending profit/weight order; "
            "use ProblemInstance.sorted_by_ratio()"
        )


def best_single_fit(instance, candidates, room):
    """
    Index of the most profitable candidate whose weight fits ``room``, or None.

    Ties go to the lowest index; items with zero profit are never chosen.
    """
    best, best_profit = None, 0.0
    for i in sorted(candidates):
        if instance.weights[i] <= room and instance.profits[i] > best_profit:
            best, best_profit = i, instance.profits[i]
    return best
