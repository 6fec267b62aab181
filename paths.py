"""
Path result returned by every search engine.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List

from graph import V
from linked_list import SinglyLinkedList


@dataclass
class DGPath(Generic[V]):
    """
    A path of connected vertices found by a search.

    For every consecutive pair (vertices[i-1], vertices[i]) the producing
    graph holds a directed edge vertices[i-1] -> vertices[i]. A single-vertex
    path has no edges and weight 0.

    total_weight and visited are search diagnostics, not properties of the
    path itself; visited maps id -> vertex for every vertex the search
    touched.
    """

    vertices: SinglyLinkedList[V] = field(default_factory=SinglyLinkedList)
    total_weight: float = 0.0
    visited: Dict[str, V] = field(default_factory=dict)

    def ids(self) -> List[str]:
        """Vertex ids along the path, start first."""
        return [v.id for v in self.vertices]

    def mark_visited(self, vertex: V) -> None:
        self.visited[vertex.id] = vertex

    def __len__(self) -> int:
        return len(self.vertices)

    def __str__(self) -> str:
        return (
            f"Weight={self.total_weight:f} Length={len(self.vertices)} "
            f"visited={len(self.visited)} ({', '.join(self.ids())})"
        )
