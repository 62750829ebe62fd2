import itertools

from dsakit.schedule import min_total_time


def test_example():
    assert min_total_time([3, 1, 2]) == 10


def test_empty():
    assert min_total_time([]) == 0


def test_single_task():
    assert min_total_time([5]) == 5


def test_order_does_not_matter():
    tasks = [4, 7, 1, 3]
    results = {min_total_time(p) for p in itertools.permutations(tasks)}
    assert len(results) == 1


def test_is_minimum_over_orderings():
    tasks = [6, 2, 9, 4]
    best = min_total_time(tasks)
    for order in itertools.permutations(tasks):
        assert best <= sum(itertools.accumulate(order))