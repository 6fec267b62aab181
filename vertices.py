"""
Vertex abstraction for the route graph.

Concrete domain objects (junctions, test dummies, etc.) implement this
interface so they can be stored in a DirectedGraph.
"""

from abc import ABC, abstractmethod
from typing import Union


class Vertex(ABC):
    """Abstract graph vertex, identified solely by its id."""

    @property
    @abstractmethod
    def id(self) -> str:
        """
        Stable unique identifier, immutable for the vertex's lifetime.

        Graph storage compares and hashes vertices by this value only.
        """
        raise NotImplementedError


def vertex_id(vertex: Union[Vertex, str]) -> str:
    """Return the identifier of a vertex, or the argument itself if it is already one."""
    if isinstance(vertex, str):
        return vertex
    return vertex.id
