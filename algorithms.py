"""
Algorithm interfaces for path search.

Keeps graph search strategies separate from the graph store and from the
route-planning glue.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from graph import E, Graph, V
from paths import DGPath

# Maps an edge payload to its non-negative weight.
WeightFunction = Callable[[E], float]


class PathSearchEngine(ABC):
    """
    Interface for single-pair path search.

    Contract shared by all strategies:
        * unknown start or target id -> None;
        * start == target -> single-vertex path with weight 0;
        * target unreachable -> None.
    """

    @abstractmethod
    def find_path(self, graph: Graph[V, E], start_id: str, target_id: str) -> Optional[DGPath[V]]:
        """
        Find a path from start_id to target_id.

        Returns:
            The path, with every vertex the search visited recorded in
            path.visited, or None if no path exists.
        """
        raise NotImplementedError


def resolve_endpoints(graph: Graph[V, E], start_id: str, target_id: str) -> Optional[Tuple[V, V]]:
    """Look up both endpoints; None if either id is unknown."""
    start = graph.get_vertex_by_id(start_id)
    target = graph.get_vertex_by_id(target_id)
    if start is None or target is None:
        return None
    return start, target


def single_vertex_path(vertex: V) -> DGPath[V]:
    path: DGPath[V] = DGPath()
    path.vertices.add(vertex)
    path.mark_visited(vertex)
    return path
