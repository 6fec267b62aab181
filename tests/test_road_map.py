"""
Tests for the junction/road domain types and the CSV loader.
"""

from pathlib import Path
import math

import pytest

from directed_graph import DirectedGraph
from junctions import Junction, Road, WEIGHT_FUNCTIONS, weight_function
from road_map import load_junctions, load_road_map, load_roads, summarize
from searcher import dijkstra_shortest_path


def _write(tmp_path: Path, junctions: str, roads: str) -> tuple[Path, Path]:
    j = tmp_path / "junctions.csv"
    r = tmp_path / "roads.csv"
    j.write_text(junctions)
    r.write_text(roads)
    return j, r


JUNCTIONS = """name,x,y,province,population
A,0,0,North,1000
B,3,4,North,500
C,6,8,South,
D,100,100,,0
"""


def test_junction_identity_and_distance():
    a = Junction("A", 0.0, 0.0)
    b = Junction("B", location_x=3.0, location_y=4.0, province="North", population=10)

    assert a.id == "A"
    assert str(b) == "B"
    assert a.distance_to(b) == pytest.approx(5.0)
    assert b.province == "North"

    # Identity is the name alone
    same = Junction("B", location_x=9.0, location_y=9.0, province=None, population=0)
    assert same == b
    assert hash(same) == hash(b)
    assert len({b, same}) == 1
    assert Junction("A", 3.0, 4.0) != b


def test_road_travel_time_and_weights():
    road = Road("N1", length_km=50.0, max_speed_kmh=100.0)

    assert road.travel_time_min == pytest.approx(30.0)
    assert WEIGHT_FUNCTIONS["length"](road) == 50.0
    assert weight_function("travel_time")(road) == pytest.approx(30.0)
    assert math.isinf(Road("track", 1.0, 0.0).travel_time_min)


def test_unknown_weight_function_raises():
    with pytest.raises(ValueError):
        weight_function("tolls")


def test_load_junctions(tmp_path: Path):
    j, _ = _write(tmp_path, JUNCTIONS, "from,to\n")

    junctions = load_junctions(j)

    assert [x.name for x in junctions] == ["A", "B", "C", "D"]
    assert junctions[1].location_x == 3.0
    assert junctions[2].population == 0
    assert junctions[3].province is None


def test_load_road_map_builds_connections_and_drops_isolated(tmp_path: Path):
    j, r = _write(
        tmp_path,
        JUNCTIONS,
        "from,to,name,length_km,max_speed_kmh,road_type\n"
        "A,B,AB,,100,A\n"
        "B,C,BC,20,50,N\n"
        "C,B,dup,1,1,N\n",
    )

    graph = load_road_map(j, r)

    # D touches no road
    assert summarize(graph) == {"junctions": 3, "roads": 4}
    assert graph.get_vertex_by_id("D") is None
    ab = graph.get_edge("A", "B")
    assert ab is graph.get_edge("B", "A")
    # Missing length falls back to straight-line distance
    assert ab.length_km == pytest.approx(5.0)
    assert graph.get_edge("C", "B").name == "BC"


def test_load_roads_rejects_unknown_junction(tmp_path: Path):
    j, r = _write(tmp_path, JUNCTIONS, "from,to,name,length_km,max_speed_kmh\nA,Q,AQ,1,1\n")

    with pytest.raises(ValueError):
        load_road_map(j, r)


def test_road_map_routes_depend_on_weight(tmp_path: Path):
    j, r = _write(
        tmp_path,
        JUNCTIONS,
        "from,to,name,length_km,max_speed_kmh\n"
        "A,C,slow,10,20\n"
        "A,B,fast1,8,120\n"
        "B,C,fast2,8,120\n",
    )
    graph = load_road_map(j, r)

    by_length = dijkstra_shortest_path(graph, "A", "C", weight_function("length"))
    by_time = dijkstra_shortest_path(graph, "A", "C", weight_function("travel_time"))

    assert by_length.ids() == ["A", "C"]
    assert by_time.ids() == ["A", "B", "C"]
    assert by_time.total_weight == pytest.approx(8.0)


def test_load_roads_counts_added(tmp_path: Path):
    j, r = _write(tmp_path, JUNCTIONS, "from,to,length_km,max_speed_kmh\nA,B,1,1\nB,A,1,1\n")
    graph = DirectedGraph()
    for junction in load_junctions(j):
        graph.add_or_get_vertex(junction)

    assert load_roads(r, graph) == 1
    assert graph.get_edge("A", "B").name == "A-B"
