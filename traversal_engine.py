"""
Unweighted path search: depth-first and breadth-first.

Both engines walk neighbours in the order Graph.get_neighbours yields them
(edge insertion order for DirectedGraph), so results are reproducible.
Edge payloads are ignored; total_weight is the number of edges on the path.
"""

from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Tuple

from algorithms import PathSearchEngine, resolve_endpoints, single_vertex_path
from graph import E, Graph, V
from paths import DGPath


class DepthFirstEngine(PathSearchEngine):
    """
    Depth-first search with backtracking.

    Commits to the first unvisited neighbour, backtracks on dead ends, and
    returns the first path that reaches the target. No optimality guarantee.

    The explicit stack of neighbour iterators visits vertices in exactly the
    order a recursive implementation would, without its recursion limit.
    """

    def find_path(self, graph: Graph[V, E], start_id: str, target_id: str) -> Optional[DGPath[V]]:
        endpoints = resolve_endpoints(graph, start_id, target_id)
        if endpoints is None:
            return None
        start, target = endpoints
        if start.id == target.id:
            return single_vertex_path(start)

        path: DGPath[V] = DGPath()
        path.mark_visited(start)
        stack: List[Tuple[V, Iterator[V]]] = [(start, iter(graph.get_neighbours(start) or ()))]

        while stack:
            _, neighbours = stack[-1]
            nxt = next((n for n in neighbours if n.id not in path.visited), None)
            if nxt is None:
                stack.pop()  # dead end
                continue

            # Mark before descending so cycles terminate.
            path.mark_visited(nxt)
            if nxt.id == target.id:
                for vertex, _ in stack:
                    path.vertices.add(vertex)
                path.vertices.add(nxt)
                path.total_weight = float(len(stack))
                return path
            stack.append((nxt, iter(graph.get_neighbours(nxt) or ())))

        return None


class BreadthFirstEngine(PathSearchEngine):
    """
    Breadth-first search over a FIFO frontier.

    The returned path has the minimum number of edges among all paths from
    start to target. Vertices are marked visited when enqueued, so each one
    enters the frontier at most once.
    """

    def find_path(self, graph: Graph[V, E], start_id: str, target_id: str) -> Optional[DGPath[V]]:
        endpoints = resolve_endpoints(graph, start_id, target_id)
        if endpoints is None:
            return None
        start, target = endpoints
        if start.id == target.id:
            return single_vertex_path(start)

        path: DGPath[V] = DGPath()
        path.mark_visited(start)
        # Records, for every enqueued vertex, the vertex that discovered it.
        discovered_by: Dict[str, V] = {}
        frontier: Deque[V] = deque([start])

        while frontier:
            current = frontier.popleft()
            for neighbour in graph.get_neighbours(current) or ():
                if neighbour.id in path.visited:
                    continue
                path.mark_visited(neighbour)
                discovered_by[neighbour.id] = current
                if neighbour.id == target.id:
                    _build_path(path, neighbour, start, discovered_by)
                    return path
                frontier.append(neighbour)

        return None


def _build_path(path: DGPath[V], target: V, start: V, parents: Dict[str, V]) -> None:
    """Walk parent links back from target and prepend each vertex."""
    vertex = target
    path.vertices.add_first(vertex)
    while vertex.id != start.id:
        vertex = parents[vertex.id]
        path.vertices.add_first(vertex)
    path.total_weight = float(len(path.vertices) - 1)
