"""
The ``<OpenDRIVE>`` document and the read/write entry points.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar, Union

from .attributes import attributePairs
from .config import DEFAULT_READ_OPTIONS, DEFAULT_WRITE_OPTIONS, ReadOptions, WriteOptions
from .context import ReadContext
from .dispatch import MANY, REQUIRED, Child
from .entity import AttributeVisitor, ChildVisitor, visitEach
from .errors import UnexpectedElement
from .events import Event, EventCursor, eventsFromElement, eventsFromSource, eventsFromString
from .geometry import Arc, Geometry, Line, ParamPoly3, PlanView, Poly3, Spiral
from .junction import Connection, Junction, LaneLinkJunction
from .lane import Lane, LaneGroup, LaneOffset, Lanes, LaneSection, RoadMark, Width
from .objects import Borders, Object, Objects, ParkingSpace
from .profile import Elevation, ElevationProfile, LateralProfile, Shape, Superelevation
from .road import Link, PredecessorSuccessor, Road
from . import writer

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class GeoReference:
    """Projection definition (usually a PROJ string) carried as character data."""
    proj4: str

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return cls(proj4=read.text())

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitText(self, visitor) -> None:
        visitor(self.proj4)

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Header:
    """
    Represents the ``<header>`` element.  Only the major and minor revision
    numbers are required.
    """
    revMajor: int = 1
    revMinor: int = 7
    name: Optional[str] = None
    version: Optional[str] = None
    date: Optional[str] = None
    north: Optional[float] = None
    south: Optional[float] = None
    east: Optional[float] = None
    west: Optional[float] = None
    vendor: Optional[str] = None
    geoReference: Optional[GeoReference] = None

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        values = dict(
            revMajor=read.attribute("revMajor", int),
            revMinor=read.attribute("revMinor", int),
            name=read.attributeOpt("name"),
            version=read.attributeOpt("version"),
            date=read.attributeOpt("date"),
            north=read.attributeOpt("north", float),
            south=read.attributeOpt("south", float),
            east=read.attributeOpt("east", float),
            west=read.attributeOpt("west", float),
            vendor=read.attributeOpt("vendor"),
        )
        found = read.children(Child("geoReference", GeoReference))
        return cls(geoReference=found["geoReference"], **values)

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("revMajor", self.revMajor),
            ("revMinor", self.revMinor),
            ("name", self.name),
            ("version", self.version),
            ("date", self.date),
            ("north", self.north),
            ("south", self.south),
            ("east", self.east),
            ("west", self.west),
            ("vendor", self.vendor),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if self.geoReference is not None:
            visitor("geoReference", self.geoReference)


@dataclass
class OpenDRIVE:
    """
    Top level container for an OpenDRIVE map: a header, then roads and
    junctions in document order.
    """
    header: Header = field(default_factory=Header)
    roads: List[Road] = field(default_factory=list)
    junctions: List[Junction] = field(default_factory=list)

    def addRoad(self, road: Road) -> None:
        self.roads.append(road)

    def addJunction(self, junction: Junction) -> None:
        self.junctions.append(junction)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        found = read.children(
            Child("header", Header, REQUIRED),
            Child("road", Road, MANY),
            Child("junction", Junction, MANY),
        )
        return cls(header=found["header"], roads=found["road"], junctions=found["junction"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        visitor("header", self.header)
        visitEach(visitor, "road", self.roads)
        visitEach(visitor, "junction", self.junctions)

    @classmethod
    def fromXML(cls, element: ET.Element, options: ReadOptions = DEFAULT_READ_OPTIONS) -> "OpenDRIVE":
        return parse(eventsFromElement(element), options)

    def toXML(self) -> ET.Element:
        return writer.toElement(self)

    def toString(self, options: WriteOptions = DEFAULT_WRITE_OPTIONS) -> str:
        return writer.toString(self, options)

    def writeFile(self, xodr_path, options: WriteOptions = DEFAULT_WRITE_OPTIONS) -> None:
        writer.writeFile(self, xodr_path, options)


# Element name -> entity type, for reading any known element as a root.
# ``border`` is left out since lanes and objects both use that name.
ENTITY_TYPES: Dict[str, Any] = {
    "OpenDRIVE": OpenDRIVE,
    "header": Header,
    "geoReference": GeoReference,
    "road": Road,
    "link": Link,
    "predecessor": PredecessorSuccessor,
    "successor": PredecessorSuccessor,
    "planView": PlanView,
    "geometry": Geometry,
    "line": Line,
    "arc": Arc,
    "spiral": Spiral,
    "poly3": Poly3,
    "paramPoly3": ParamPoly3,
    "elevationProfile": ElevationProfile,
    "elevation": Elevation,
    "lateralProfile": LateralProfile,
    "superelevation": Superelevation,
    "shape": Shape,
    "lanes": Lanes,
    "laneOffset": LaneOffset,
    "laneSection": LaneSection,
    "left": LaneGroup,
    "center": LaneGroup,
    "right": LaneGroup,
    "lane": Lane,
    "width": Width,
    "roadMark": RoadMark,
    "objects": Objects,
    "object": Object,
    "parkingSpace": ParkingSpace,
    "borders": Borders,
    "junction": Junction,
    "connection": Connection,
    "laneLink": LaneLinkJunction,
}


def parseFragment(events: Iterable[Event], options: ReadOptions = DEFAULT_READ_OPTIONS, expected: Optional[str] = None):
    """
    Read a single entity from an event stream whose first element is its
    root.  With ``expected`` the root tag must match it; otherwise any tag in
    :data:`ENTITY_TYPES` is accepted.
    """
    cursor = EventCursor(events, options.maxDepth)
    start = cursor.nextStart()
    if expected is not None and start.name != expected:
        raise UnexpectedElement(start.name, expected)
    entity_type = ENTITY_TYPES.get(start.name)
    if entity_type is None:
        raise UnexpectedElement(start.name, "a known OpenDRIVE element")
    read = ReadContext(cursor, start.name, start.attributes, options)
    entity = entity_type.fromRead(read)
    read.skip()
    cursor.finish()
    return entity


def parse(events: Iterable[Event], options: ReadOptions = DEFAULT_READ_OPTIONS) -> OpenDRIVE:
    """Build a document from markup events.  The first error aborts the parse."""
    document = parseFragment(events, options, expected="OpenDRIVE")
    logger.debug("parsed document with %d roads and %d junctions", len(document.roads), len(document.junctions))
    return document


def parseString(text: Union[str, bytes], options: ReadOptions = DEFAULT_READ_OPTIONS) -> OpenDRIVE:
    return parse(eventsFromString(text), options)


def parseFile(xodr_path, options: ReadOptions = DEFAULT_READ_OPTIONS) -> OpenDRIVE:
    logger.debug("reading %s", xodr_path)
    return parse(eventsFromSource(xodr_path), options)


def serialize(document: OpenDRIVE, sink: writer.EventSink) -> None:
    writer.serialize(document, sink)
