"""
Convenience functions, one per search strategy.

Each returns a DGPath or None when either id is unknown or no path exists.
"""

from typing import Dict, Optional

from algorithms import PathSearchEngine, WeightFunction
from dijkstra_engine import DijkstraEngine
from graph import E, Graph, V
from paths import DGPath
from traversal_engine import BreadthFirstEngine, DepthFirstEngine


def depth_first_search(graph: Graph[V, E], start_id: str, target_id: str) -> Optional[DGPath[V]]:
    return DepthFirstEngine().find_path(graph, start_id, target_id)


def breadth_first_search(graph: Graph[V, E], start_id: str, target_id: str) -> Optional[DGPath[V]]:
    return BreadthFirstEngine().find_path(graph, start_id, target_id)


def dijkstra_shortest_path(
    graph: Graph[V, E], start_id: str, target_id: str, weight_of: WeightFunction
) -> Optional[DGPath[V]]:
    """Weighted shortest path; weight_of must return non-negative weights."""
    return DijkstraEngine(weight_of).find_path(graph, start_id, target_id)


def build_engines(weight_of: WeightFunction) -> Dict[str, PathSearchEngine]:
    """All strategies keyed by the name the route planner reports them under."""
    return {
        "dfs": DepthFirstEngine(),
        "bfs": BreadthFirstEngine(),
        "dijkstra": DijkstraEngine(weight_of),
    }
