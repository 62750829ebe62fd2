import pytest

from dsakit.obst import ObstResult, optimal_bst, min_search_cost

SAMPLE = [0.10, 0.20, 0.30, 0.40]


def test_single_key_costs_its_probability():
    assert min_search_cost([0.5]) == pytest.approx(0.5)


def test_two_keys():
    assert min_search_cost([0.1, 0.2]) == pytest.approx(0.4)


def test_equal_weights_pick_middle_root():
    result = optimal_bst([1, 1, 1])
    assert result.min_cost == pytest.approx(5)
    assert result.root[1][3] == 2


def test_no_keys_cost_nothing():
    result = optimal_bst([])
    assert result.min_cost == 0
    assert result.size == 0


def test_diagonal_holds_inputs():
    result = optimal_bst(SAMPLE)
    assert result.size == len(SAMPLE)
    for i, prob in enumerate(SAMPLE, start=1):
        assert result.cost[i][i] == pytest.approx(prob)
        assert result.root[i][i] == i


def test_table_shapes():
    result = optimal_bst(SAMPLE)
    n = len(SAMPLE)
    assert len(result.cost) == n + 2
    assert all(len(row) == n + 1 for row in result.cost)
    assert len(result.root) == n + 1
    assert all(len(row) == n + 1 for row in result.root)


def test_roots_lie_in_their_range():
    result = optimal_bst(SAMPLE)
    n = len(SAMPLE)
    for i in range(1, n + 1):
        for j in range(i, n + 1):
            assert i <= result.root[i][j] <= j


def test_cost_grows_with_more_keys():
    result = optimal_bst(SAMPLE)
    n = len(SAMPLE)
    for i in range(1, n + 1):
        for j in range(i + 1, n + 1):
            assert result.cost[i][j] >= result.cost[i][j - 1]
            assert result.cost[i][j] >= result.cost[i + 1][j]


def test_cost_bounds():
    total = sum(SAMPLE)
    cost = min_search_cost(SAMPLE)
    assert total <= cost <= total * len(SAMPLE)


def test_reversed_keys_cost_the_same():
    assert min_search_cost(SAMPLE[::-1]) == pytest.approx(min_search_cost(SAMPLE))


def test_scaling_probabilities_scales_cost():
    doubled = [2 * p for p in SAMPLE]
    assert min_search_cost(doubled) == pytest.approx(2 * min_search_cost(SAMPLE))


def test_min_search_cost_matches_tables():
    result = optimal_bst(SAMPLE)
    assert min_search_cost(SAMPLE) == result.min_cost
    assert result.min_cost == result.cost[1][len(SAMPLE)]


def test_result_built_directly():
    result = ObstResult(cost=[[0.0], [0.0]], root=[[0]])
    assert result.size == 0
    assert result.min_cost == 0.0