from conftest import LANES, PLAN_VIEW, makeDocument, makeRoad

from OpenDriveStream import ElementType, RoadNetworkIndex, parseString
from OpenDriveStream.index import junctionNode, roadNode


def test_lookup_by_id(sample_xodr):
    index = RoadNetworkIndex(parseString(sample_xodr))
    assert set(index.roads) == {"1", "2", "3"}
    assert index.junctions["100"].name == "crossing"


def test_resolve_links(sample_xodr):
    index = RoadNetworkIndex(parseString(sample_xodr))
    road_two = index.roads["2"]
    assert index.resolve(road_two.link.predecessor) is index.roads["1"]
    assert index.resolve(road_two.link.successor) is index.roads["3"]
    assert index.resolve(index.roads["1"].link.successor) is index.junctions["100"]


def test_linkage_graph(sample_xodr):
    index = RoadNetworkIndex(parseString(sample_xodr))
    assert set(index.successors("1")) == {junctionNode("100"), roadNode("2")}
    assert index.predecessors("2") == [roadNode("1")]
    assert index.successors("2") == [roadNode("3")]
    assert index.successors("3") == []
    assert index.unresolved() == []
    assert index.isolatedRoads() == []
    assert len(index.components()) == 1


def test_connection_edges_are_tagged_with_the_junction(sample_xodr):
    index = RoadNetworkIndex(parseString(sample_xodr))
    data = index.graph.get_edge_data(roadNode("1"), roadNode("2"))
    assert data["junction"] == "100"


def test_dangling_links_become_unresolved_nodes():
    body = '<link><successor elementType="junction" elementId="9"/></link>' + PLAN_VIEW + LANES
    document = parseString(makeDocument(makeRoad(body=body), makeRoad('id="6" junction="-1" length="1.0"')))
    index = RoadNetworkIndex(document)
    assert index.unresolved() == [(ElementType.JUNCTION, "9")]
    assert index.resolve(document.roads[0].link.successor) is None
    assert index.isolatedRoads() == ["6"]
    assert len(index.components()) == 2


def test_first_road_with_an_id_wins():
    first = makeRoad('id="5" junction="-1" length="1.0" name="first"')
    second = makeRoad('id="5" junction="-1" length="2.0" name="second"')
    index = RoadNetworkIndex(parseString(makeDocument(first, second)))
    assert index.roads["5"].name == "first"
