"""
Heap-based Dijkstra engine.

Uses Python's heapq to compute weighted shortest paths over any Graph
implementation. Edge weights come from a caller-supplied weight function.
"""

from dataclasses import dataclass
from typing import Dict, Generic, List, Optional, Tuple
import heapq
import math

from algorithms import PathSearchEngine, WeightFunction, resolve_endpoints, single_vertex_path
from graph import E, Graph, V
from paths import DGPath


@dataclass
class _Progress(Generic[V]):
    """Per-vertex bookkeeping during one run."""

    vertex: V
    weight_sum_to: float = math.inf
    from_id: Optional[str] = None
    marked: bool = False


class DijkstraEngine(PathSearchEngine):
    """
    Single-pair Dijkstra using a binary heap.

    Precondition: weight_of returns non-negative weights. Negative weights
    give undefined results and are not checked.

    Heap entries are (weight, vertex_id): ties on weight pop in id order.
    A vertex may sit in the heap several times with stale weights; entries
    for already-marked vertices are skipped on pop.

    Complexity:
        O(E log V) over the vertices reachable from the start.
    """

    def __init__(self, weight_of: WeightFunction) -> None:
        self._weight_of = weight_of

    def find_path(self, graph: Graph[V, E], start_id: str, target_id: str) -> Optional[DGPath[V]]:
        endpoints = resolve_endpoints(graph, start_id, target_id)
        if endpoints is None:
            return None
        start, target = endpoints
        if start.id == target.id:
            return single_vertex_path(start)

        path: DGPath[V] = DGPath()
        path.mark_visited(start)

        progress: Dict[str, _Progress[V]] = {start.id: _Progress(start, weight_sum_to=0.0)}
        pq: List[Tuple[float, str]] = [(0.0, start.id)]  # priority queue of (weight, id)

        while pq:
            _, u_id = heapq.heappop(pq)
            current = progress[u_id]
            if current.marked:
                continue

            current.marked = True
            path.mark_visited(current.vertex)

            if u_id == target.id:
                path.total_weight = current.weight_sum_to
                node: Optional[_Progress[V]] = current
                while node is not None:
                    path.vertices.add_first(node.vertex)
                    node = progress[node.from_id] if node.from_id is not None else None
                return path

            self._relax(graph, current, progress, pq)

        return None

    def shortest_path_costs(self, graph: Graph[V, E], source_id: str) -> Dict[str, float]:
        """
        Compute the cost map for all vertices reachable from source_id.

        Returns:
            Mapping vertex_id -> cost(source -> vertex); empty if source_id
            is unknown.
        """
        source = graph.get_vertex_by_id(source_id)
        if source is None:
            return {}

        progress: Dict[str, _Progress[V]] = {source.id: _Progress(source, weight_sum_to=0.0)}
        pq: List[Tuple[float, str]] = [(0.0, source.id)]

        while pq:
            _, u_id = heapq.heappop(pq)
            current = progress[u_id]
            if current.marked:
                continue
            current.marked = True
            self._relax(graph, current, progress, pq)

        return {vid: p.weight_sum_to for vid, p in progress.items()}

    def _relax(
        self,
        graph: Graph[V, E],
        current: _Progress[V],
        progress: Dict[str, _Progress[V]],
        pq: List[Tuple[float, str]],
    ) -> None:
        u = current.vertex
        for v in graph.get_neighbours(u) or ():
            edge = graph.get_edge(u, v)
            if edge is None:
                continue
            entry = progress.get(v.id)
            if entry is None:
                entry = progress[v.id] = _Progress(v)
            if entry.marked:
                continue

            alt = current.weight_sum_to + self._weight_of(edge)
            if alt < entry.weight_sum_to:
                entry.weight_sum_to = alt
                entry.from_id = u.id
                heapq.heappush(pq, (alt, v.id))
