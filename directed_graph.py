"""
Concrete directed graph store.

Implements the Graph interface with two id-keyed maps:

    _vertices:  id -> vertex
    _adj:       from_id -> (to_id -> edge payload)

Representation invariants, held after every public mutation:
    1. every vertex is stored once, under its own id;
    2. every stored vertex has an adjacency entry, possibly empty;
    3. an ordered pair (a, b) maps to at most one payload, independent of (b, a);
    4. every id used as a key or nested key of _adj is also a key of _vertices.

Dicts preserve insertion order, so neighbours are always reported in the
order their edges were added.
"""

from typing import Dict, List, Optional, Tuple, Union

from graph import E, Graph, V
from vertices import vertex_id


class DirectedGraph(Graph[V, E]):
    """
    Directed graph of identifiable vertices with at most one edge per ordered pair.
    """

    def __init__(self) -> None:
        self._vertices: Dict[str, V] = {}
        self._adj: Dict[str, Dict[str, E]] = {}

    # --- Mutation API --------------------------------------------------------

    def add_or_get_vertex(self, vertex: Optional[V]) -> Optional[V]:
        """
        Insert vertex unless a vertex with the same id is already stored.

        Returns the vertex now stored under that id; an existing vertex is
        never overwritten (first writer wins).
        """
        if vertex is None:
            return None
        existing = self._vertices.get(vertex.id)
        if existing is not None:
            return existing
        self._vertices[vertex.id] = vertex
        self._adj[vertex.id] = {}
        return vertex

    def add_edge(self, from_vertex: Optional[V], to_vertex: Optional[V], edge: Optional[E]) -> bool:
        """
        Add a directed edge from_vertex -> to_vertex carrying edge.

        Auto-adds both vertices. Returns False on None input or when an edge
        already exists for this ordered pair (the stored payload is kept).
        """
        if from_vertex is None or to_vertex is None or edge is None:
            return False
        src = self.add_or_get_vertex(from_vertex)
        dst = self.add_or_get_vertex(to_vertex)
        outgoing = self._adj[src.id]
        if dst.id in outgoing:
            return False
        outgoing[dst.id] = edge
        return True

    def add_edge_by_id(self, from_id: str, to_id: str, edge: Optional[E]) -> bool:
        """Like add_edge, but both ids must already resolve to stored vertices."""
        src = self._vertices.get(from_id)
        dst = self._vertices.get(to_id)
        if src is None or dst is None:
            return False
        return self.add_edge(src, dst, edge)

    def add_connection(self, v1: Optional[V], v2: Optional[V], edge: Optional[E]) -> bool:
        """
        Add both v1 -> v2 and v2 -> v1 with the same payload.

        All or nothing: if either direction already exists, nothing is added
        and False is returned.
        """
        if v1 is None or v2 is None or edge is None:
            return False
        if self._has_edge(v1.id, v2.id) or self._has_edge(v2.id, v1.id):
            return False
        return self.add_edge(v1, v2, edge) and self.add_edge(v2, v1, edge)

    def add_connection_by_id(self, id1: str, id2: str, edge: Optional[E]) -> bool:
        """Like add_connection, but both ids must already resolve to stored vertices."""
        v1 = self._vertices.get(id1)
        v2 = self._vertices.get(id2)
        if v1 is None or v2 is None:
            return False
        return self.add_connection(v1, v2, edge)

    def remove_unconnected_vertices(self) -> int:
        """
        Drop every vertex with neither outgoing nor incoming edges.

        Vertices that are only edge targets are kept, so no edge is ever
        left pointing at a removed vertex. Returns the number removed.
        """
        targets = {to_id for outgoing in self._adj.values() for to_id in outgoing}
        isolated = [vid for vid, outgoing in self._adj.items() if not outgoing and vid not in targets]
        for vid in isolated:
            del self._adj[vid]
            del self._vertices[vid]
        return len(isolated)

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> Tuple[V, ...]:
        return tuple(self._vertices.values())

    def get_vertex_by_id(self, vertex_id: str) -> Optional[V]:
        return self._vertices.get(vertex_id)

    def get_neighbours(self, vertex: Union[V, str, None]) -> Optional[Tuple[V, ...]]:
        outgoing = self._outgoing(vertex)
        if outgoing is None:
            return None
        return tuple(self._vertices[to_id] for to_id in outgoing)

    def get_edge(self, from_vertex: Union[V, str, None], to_vertex: Union[V, str, None]) -> Optional[E]:
        outgoing = self._outgoing(from_vertex)
        if outgoing is None or to_vertex is None:
            return None
        return outgoing.get(vertex_id(to_vertex))

    # --- Further reads -------------------------------------------------------

    def get_edges(self, from_vertex: Union[V, str, None]) -> Optional[Tuple[E, ...]]:
        """
        Outgoing edge payloads of from_vertex.

        None if from_vertex is unknown, empty if it has no outgoing edges.
        """
        outgoing = self._outgoing(from_vertex)
        if outgoing is None:
            return None
        return tuple(outgoing.values())

    def get_num_vertices(self) -> int:
        return len(self._vertices)

    def get_num_edges(self) -> int:
        return sum(len(outgoing) for outgoing in self._adj.values())

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, str):
            return vertex in self._vertices
        vid = getattr(vertex, "id", None)
        return isinstance(vid, str) and vid in self._vertices

    def __str__(self) -> str:
        lines: List[str] = []
        for vid, outgoing in self._adj.items():
            edges = ",".join(f"{to_id}({edge})" for to_id, edge in outgoing.items())
            lines.append(f"{vid}: [{edges}]")
        return "{ " + ",\n  ".join(lines) + "\n}"

    # --- Internal helpers ----------------------------------------------------

    def _outgoing(self, vertex: Union[V, str, None]) -> Optional[Dict[str, E]]:
        if vertex is None:
            return None
        return self._adj.get(vertex_id(vertex))

    def _has_edge(self, from_id: str, to_id: str) -> bool:
        return to_id in self._adj.get(from_id, {})
