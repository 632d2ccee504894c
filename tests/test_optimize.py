import random

import pytest

from algokit.optimize import knapsack, min_partition_difference


def test_knapsack_classic_example():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_everything_fits():
    weights = [1, 2, 3]
    values = [7, 8, 9]
    assert knapsack(sum(weights), weights, values) == sum(values)


def test_knapsack_zero_capacity_and_no_items():
    assert knapsack(0, [1, 2], [5, 6]) == knapsack(10, [], [])
    assert knapsack(10, [], []) == 0


def test_knapsack_item_too_heavy():
    assert knapsack(4, [5], [100]) == knapsack(0, [], [])


def test_knapsack_monotone_in_capacity():
    rng = random.Random(9)
    weights = [rng.randint(1, 10) for _ in range(8)]
    values = [rng.randint(1, 30) for _ in range(8)]
    results = [knapsack(c, weights, values) for c in range(0, 40)]
    assert results == sorted(results)
    assert results[-1] <= sum(values)


@pytest.mark.parametrize(
    "capacity, weights, values",
    [(5, [1, 2], [3]), (-1, [1], [1]), (5, [-2], [4])],
)
def test_knapsack_invalid_arguments(capacity, weights, values):
    with pytest.raises(ValueError):
        knapsack(capacity, weights, values)


def test_min_partition_source_array():
    assert min_partition_difference([3, 1, 4, 2, 2, 1]) == 1


def test_min_partition_small_cases():
    assert min_partition_difference([]) == min_partition_difference([5, 5])
    assert min_partition_difference([7]) == 7


def test_min_partition_invariants():
    rng = random.Random(4)
    for _ in range(20):
        items = [rng.randint(1, 25) for _ in range(rng.randint(1, 10))]
        diff = min_partition_difference(items)
        assert 0 <= diff <= sum(items)
        assert diff % 2 == sum(items) % 2
        assert min_partition_difference(list(reversed(items))) == diff