"""
Directed graph abstraction for path search.

Vertices are Vertex instances, addressed by their id.
Edges are directed: u -> v with an opaque payload.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, Sequence, TypeVar, Union

from vertices import Vertex

V = TypeVar("V", bound=Vertex)
E = TypeVar("E")


class Graph(ABC, Generic[V, E]):
    """Read-only view of a directed graph over Vertex objects."""

    @abstractmethod
    def vertices(self) -> Iterable[V]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def get_vertex_by_id(self, vertex_id: str) -> Optional[V]:
        """Return the vertex stored under vertex_id, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_neighbours(self, vertex: Union[V, str]) -> Optional[Sequence[V]]:
        """
        Vertices reachable over one outgoing edge, in edge insertion order.

        Returns None if vertex is unknown, an empty sequence if it has no
        outgoing edges.
        """
        raise NotImplementedError

    @abstractmethod
    def get_edge(self, from_vertex: Union[V, str], to_vertex: Union[V, str]) -> Optional[E]:
        """Payload of the directed edge from_vertex -> to_vertex, or None."""
        raise NotImplementedError
