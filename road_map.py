"""
Utilities to load a road network from CSV files into a DirectedGraph.

junctions.csv columns: name, x, y, province, population
roads.csv columns:     from, to, name, length_km, max_speed_kmh, road_type

Every road becomes a bidirectional connection. An empty length_km falls
back to the straight-line distance between the two junctions.
"""

from pathlib import Path
from typing import Dict, List, Optional
import csv

from directed_graph import DirectedGraph
from junctions import Junction, Road


RoadMap = DirectedGraph[Junction, Road]


def load_junctions(path: Path) -> List[Junction]:
    with path.open(newline="") as f:
        reader = csv.DictReader(f)
        junctions: List[Junction] = []
        for row in reader:
            junctions.append(
                Junction(
                    name=row["name"].strip(),
                    location_x=_float(row.get("x")),
                    location_y=_float(row.get("y")),
                    province=(row.get("province") or "").strip() or None,
                    population=int(_float(row.get("population"))),
                )
            )
        return junctions


def load_roads(path: Path, graph: RoadMap) -> int:
    """
    Add one connection per CSV row to graph.

    Both endpoints must already be in graph. Rows duplicating an existing
    connection are skipped.

    Returns:
        Number of connections added.
    """
    added = 0
    with path.open(newline="") as f:
        reader = csv.DictReader(f)
        for line, row in enumerate(reader, start=2):
            src = graph.get_vertex_by_id(row["from"].strip())
            dst = graph.get_vertex_by_id(row["to"].strip())
            if src is None or dst is None:
                raise ValueError(f"{path}:{line}: road references unknown junction")

            length = row.get("length_km") or ""
            road = Road(
                name=(row.get("name") or f"{src.id}-{dst.id}").strip(),
                length_km=float(length) if length.strip() else src.distance_to(dst),
                max_speed_kmh=_float(row.get("max_speed_kmh")),
                road_type=(row.get("road_type") or "").strip(),
            )
            if graph.add_connection(src, dst, road):
                added += 1
    return added


def load_road_map(junctions_csv: Path, roads_csv: Path) -> RoadMap:
    """
    Build the road map and drop junctions that no road touches.
    """
    graph: RoadMap = DirectedGraph()
    for junction in load_junctions(junctions_csv):
        graph.add_or_get_vertex(junction)
    load_roads(roads_csv, graph)
    graph.remove_unconnected_vertices()
    return graph


def summarize(graph: RoadMap) -> Dict[str, int]:
    return {
        "junctions": graph.get_num_vertices(),
        "roads": graph.get_num_edges(),
    }


def _float(value: Optional[str]) -> float:
    if value is None or not str(value).strip():
        return 0.0
    return float(value)
