"""
Randomised checks of BFS hop-optimality and Dijkstra weight-optimality
against brute-force enumeration of simple paths on small graphs.
"""

from dataclasses import dataclass
from typing import Dict, List
import math
import random

import pytest

from dijkstra_engine import DijkstraEngine
from directed_graph import DirectedGraph
from searcher import breadth_first_search, depth_first_search, dijkstra_shortest_path
from vertices import Vertex


@dataclass(frozen=True)
class DummyVertex(Vertex):
    _id: str

    @property
    def id(self) -> str:
        return self._id


def _random_graph(rng: random.Random, n: int, p: float) -> DirectedGraph:
    g = DirectedGraph()
    vs = [DummyVertex(f"v{i}") for i in range(n)]
    for v in vs:
        g.add_or_get_vertex(v)
    for u in vs:
        for v in vs:
            if u is not v and rng.random() < p:
                g.add_edge(u, v, float(rng.randint(0, 9)))
    return g


def _simple_paths(g: DirectedGraph, start: str, target: str) -> List[List[str]]:
    found: List[List[str]] = []

    def walk(path: List[str]) -> None:
        if path[-1] == target:
            found.append(list(path))
            return
        for nb in g.get_neighbours(path[-1]):
            if nb.id not in path:
                path.append(nb.id)
                walk(path)
                path.pop()

    walk([start])
    return found


def _weight(g: DirectedGraph, ids: List[str]) -> float:
    return sum(g.get_edge(u, v) for u, v in zip(ids, ids[1:]))


def _assert_follows_edges(g: DirectedGraph, ids: List[str]) -> None:
    for u, v in zip(ids, ids[1:]):
        assert g.get_edge(u, v) is not None


@pytest.mark.parametrize("seed", range(20))
def test_searches_agree_with_brute_force(seed: int):
    rng = random.Random(seed)
    g = _random_graph(rng, n=6, p=0.35)

    for start in ("v0", "v1"):
        for target in ("v4", "v5"):
            paths = _simple_paths(g, start, target)
            dfs = depth_first_search(g, start, target)
            bfs = breadth_first_search(g, start, target)
            dsp = dijkstra_shortest_path(g, start, target, lambda w: w)

            if not paths:
                assert dfs is None and bfs is None and dsp is None
                continue

            min_hops = min(len(p) - 1 for p in paths)
            min_weight = min(_weight(g, p) for p in paths)

            for result in (dfs, bfs, dsp):
                assert result is not None
                assert result.ids()[0] == start and result.ids()[-1] == target
                _assert_follows_edges(g, result.ids())

            assert len(bfs) - 1 == min_hops
            assert dsp.total_weight == pytest.approx(_weight(g, dsp.ids()))
            assert dsp.total_weight == pytest.approx(min_weight)


def test_costs_match_find_path():
    rng = random.Random(7)
    g = _random_graph(rng, n=8, p=0.3)

    engine = DijkstraEngine(lambda w: w)
    costs: Dict[str, float] = engine.shortest_path_costs(g, "v0")
    for v in g.vertices():
        path = engine.find_path(g, "v0", v.id)
        if path is None:
            assert v.id not in costs
        else:
            assert costs[v.id] == pytest.approx(path.total_weight)
    assert all(not math.isinf(c) for c in costs.values())
