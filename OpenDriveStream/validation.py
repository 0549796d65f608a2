"""
Semantic checks over a fully parsed document.

The reader only enforces structure.  Everything here is advisory: problems
come back as :class:`Issue` records and nothing is raised, so callers decide
what they can live with.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

from .enums import ElementType
from .opendrive import OpenDRIVE
from .profile import isStrictlyAscending
from .road import PredecessorSuccessor, Road

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Issue:
    code: str
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message} [{self.code}]"


def _check_edge(edge: Optional[PredecessorSuccessor], path: str, road_ids, junction_ids) -> List[Issue]:
    if edge is None:
        return []
    issues = []
    if edge.contactPoint is not None and edge.elementS is not None:
        issues.append(Issue("W_ANCHOR", path, "contactPoint and elementS are both set"))
    if edge.elementS is not None and edge.elementType is ElementType.JUNCTION:
        issues.append(Issue("W_ELEMENT_S_ON_JUNCTION", path, "elementS is only valid for elementType 'road'"))
    if edge.elementDir is not None and edge.elementS is None:
        issues.append(Issue("W_ELEMENT_DIR", path, "elementDir given without elementS"))
    if edge.elementType is ElementType.JUNCTION:
        if edge.elementId not in junction_ids:
            issues.append(Issue("W_DANGLING", path, f"junction {edge.elementId!r} does not exist"))
    elif edge.elementId not in road_ids:
        issues.append(Issue("W_DANGLING", path, f"road {edge.elementId!r} does not exist"))
    return issues


def _check_road(road: Road, road_ids, junction_ids) -> List[Issue]:
    path = f"road[{road.id}]"
    issues = []
    if not road.length.meters > 0.0:
        issues.append(Issue("W_LENGTH", path, f"length must be positive, got {road.length.meters!r}"))
    if road.isConnectingRoad and road.junction not in junction_ids:
        issues.append(Issue("W_DANGLING", path, f"junction {road.junction!r} does not exist"))
    if road.link is not None:
        issues += _check_edge(road.link.predecessor, path + "/link/predecessor", road_ids, junction_ids)
        issues += _check_edge(road.link.successor, path + "/link/successor", road_ids, junction_ids)
    sequences = []
    if road.planView is not None:
        sequences.append(("planView/geometry", [g.s for g in road.planView.geometries]))
    if road.elevationProfile is not None:
        sequences.append(("elevationProfile/elevation", [e.s for e in road.elevationProfile.elevations]))
    if road.lateralProfile is not None:
        sequences.append(("lateralProfile/superelevation", [e.s for e in road.lateralProfile.superelevations]))
    if road.lanes is not None:
        sequences.append(("lanes/laneOffset", [o.s for o in road.lanes.laneOffsets]))
        sequences.append(("lanes/laneSection", [ls.s for ls in road.lanes.laneSections]))
    for name, values in sequences:
        if not isStrictlyAscending(values):
            issues.append(Issue("W_ORDER", f"{path}/{name}", "s values are not strictly ascending"))
    return issues


def validate(document: OpenDRIVE) -> List[Issue]:
    """Return every semantic issue found in ``document``, in document order."""
    road_counts = Counter(road.id for road in document.roads)
    road_ids = set(road_counts)
    junction_ids = {junction.id for junction in document.junctions}
    issues = []
    for road_id, count in road_counts.items():
        if count > 1:
            issues.append(Issue("W_DUPLICATE_ID", f"road[{road_id}]", f"id used by {count} roads"))
    for road in document.roads:
        issues += _check_road(road, road_ids, junction_ids)
    for junction in document.junctions:
        for connection in junction.connections:
            path = f"junction[{junction.id}]/connection[{connection.id}]"
            for attr in ("incomingRoad", "connectingRoad"):
                ref = getattr(connection, attr)
                if ref is not None and ref not in road_ids:
                    issues.append(Issue("W_DANGLING", path, f"{attr} {ref!r} does not exist"))
    logger.debug("validation found %d issues", len(issues))
    return issues
