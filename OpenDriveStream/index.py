"""
Id lookups and the road linkage graph of a parsed document.

Links inside a document are plain id strings.  This module resolves them in a
separate pass once the whole document is in memory.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Union

import networkx as nx

from .enums import ElementType
from .junction import Junction
from .opendrive import OpenDRIVE
from .road import PredecessorSuccessor, Road

logger = logging.getLogger(__name__)

Node = Tuple[ElementType, str]


def roadNode(road_id: str) -> Node:
    return (ElementType.ROAD, road_id)


def junctionNode(junction_id: str) -> Node:
    return (ElementType.JUNCTION, junction_id)


class RoadNetworkIndex:
    """
    Maps ids to roads and junctions and builds a directed graph whose edges
    follow the driving order predecessor -> road -> successor.  Junction
    connections add incomingRoad -> connectingRoad edges.  References to
    missing elements still become nodes, flagged ``resolved=False``.
    """

    document = None
    roads = None
    junctions = None
    graph = None

    def __init__(self, document: OpenDRIVE):
        self.document = document
        self.roads: Dict[str, Road] = {}
        self.junctions: Dict[str, Junction] = {}
        for road in document.roads:
            self.roads.setdefault(road.id, road)
        for junction in document.junctions:
            self.junctions.setdefault(junction.id, junction)
        self.graph = self._buildGraph()

    def resolve(self, edge: PredecessorSuccessor) -> Optional[Union[Road, Junction]]:
        """Look up the element a link points at; elementType defaults to road."""
        if edge.elementType is ElementType.JUNCTION:
            return self.junctions.get(edge.elementId)
        return self.roads.get(edge.elementId)

    def _nodeFor(self, edge: PredecessorSuccessor) -> Node:
        if edge.elementType is ElementType.JUNCTION:
            return junctionNode(edge.elementId)
        return roadNode(edge.elementId)

    def _addNode(self, graph: nx.DiGraph, node: Node) -> None:
        if node in graph:
            return
        kind, element_id = node
        table = self.junctions if kind is ElementType.JUNCTION else self.roads
        graph.add_node(node, resolved=element_id in table)

    def _buildGraph(self) -> nx.DiGraph:
        graph = nx.DiGraph()
        for road_id in self.roads:
            self._addNode(graph, roadNode(road_id))
        for junction_id in self.junctions:
            self._addNode(graph, junctionNode(junction_id))
        for road in self.roads.values():
            here = roadNode(road.id)
            if road.link is None:
                continue
            if road.link.predecessor is not None:
                there = self._nodeFor(road.link.predecessor)
                self._addNode(graph, there)
                graph.add_edge(there, here, link="predecessor")
            if road.link.successor is not None:
                there = self._nodeFor(road.link.successor)
                self._addNode(graph, there)
                graph.add_edge(here, there, link="successor")
        for junction in self.junctions.values():
            for connection in junction.connections:
                if connection.incomingRoad is None or connection.connectingRoad is None:
                    continue
                incoming = roadNode(connection.incomingRoad)
                connecting = roadNode(connection.connectingRoad)
                self._addNode(graph, incoming)
                self._addNode(graph, connecting)
                graph.add_edge(incoming, connecting, link="connection", junction=junction.id)
        logger.debug("linkage graph has %d nodes and %d edges", graph.number_of_nodes(), graph.number_of_edges())
        return graph

    def successors(self, road_id: str) -> List[Node]:
        return list(self.graph.successors(roadNode(road_id)))

    def predecessors(self, road_id: str) -> List[Node]:
        return list(self.graph.predecessors(roadNode(road_id)))

    def unresolved(self) -> List[Node]:
        return [node for node, resolved in self.graph.nodes(data="resolved") if not resolved]

    def isolatedRoads(self) -> List[str]:
        return [element_id for (kind, element_id) in nx.isolates(self.graph) if kind is ElementType.ROAD]

    def components(self) -> List[set]:
        return [set(c) for c in nx.weakly_connected_components(self.graph)]
