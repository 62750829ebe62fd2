import math

import pytest

from dsakit.graph import WeightedGraph
from dsakit.paths import dijkstra

ROADS = [(0, 1, 150), (0, 2, 180), (1, 4, 120), (2, 3, 500), (3, 4, 300)]
MUMBAI, PUNE, NASHIK, NAGPUR, PANVEL = range(5)


def roads():
    graph = WeightedGraph(5)
    for u, v, w in ROADS:
        graph.add_edge(u, v, w)
    return graph


def test_start_distance_is_zero():
    assert dijkstra(roads(), MUMBAI)[MUMBAI] == 0


def test_direct_roads_are_shortest_from_mumbai():
    dist = dijkstra(roads(), MUMBAI)
    assert dist[PUNE] == 150
    assert dist[NASHIK] == 180


def test_nagpur_goes_through_panvel():
    assert dijkstra(roads(), MUMBAI)[NAGPUR] == 570


@pytest.mark.parametrize("start", range(5))
def test_distances_satisfy_triangle_inequality(start):
    dist = dijkstra(roads(), start)
    for u, v, w in ROADS:
        assert dist[v] <= dist[u] + w
        assert dist[u] <= dist[v] + w


@pytest.mark.parametrize("start", range(5))
def test_every_distance_is_achieved_by_some_edge(start):
    graph = roads()
    dist = dijkstra(graph, start)
    for v in range(5):
        if v != start:
            assert any(dist[u] + w == dist[v] for u, w in graph.neighbors(v))


def test_undirected_distances_are_symmetric():
    graph = roads()
    table = [dijkstra(graph, s) for s in range(5)]
    for a in range(5):
        for b in range(5):
            assert table[a][b] == table[b][a]


def test_unreachable_vertex_is_infinite():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 7)
    dist = dijkstra(graph, 0)
    assert dist[1] == 7
    assert math.isinf(dist[2])


def test_invalid_start():
    with pytest.raises(ValueError):
        dijkstra(roads(), 5)
    with pytest.raises(ValueError):
        dijkstra(WeightedGraph(0), 0)