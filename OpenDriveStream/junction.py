from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Type, TypeVar

from .attributes import attributePairs
from .context import ReadContext
from .dispatch import MANY, Child
from .entity import AttributeVisitor, ChildVisitor, visitEach
from .enums import ContactPoint, JunctionType

T = TypeVar("T")


@dataclass
class LaneLinkJunction:
    """Represents a lane to lane mapping inside a junction connection."""
    fromId: int
    toId: int

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(
            fromId=read.attribute("from", int),
            toId=read.attribute("to", int),
        ))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("from", self.fromId), ("to", self.toId)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Connection:
    """
    Represents a junction ``<connection>``: traffic entering from
    ``incomingRoad`` continues on ``connectingRoad`` at ``contactPoint``.
    Both roads are referenced by id only.
    """
    id: str
    incomingRoad: Optional[str] = None
    connectingRoad: Optional[str] = None
    contactPoint: Optional[ContactPoint] = None
    laneLinks: List[LaneLinkJunction] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        connecting_road = read.attributeOpt("connectingRoad")
        contact_point = read.attributeOpt("contactPoint", ContactPoint)
        connection_id = read.attribute("id")
        incoming_road = read.attributeOpt("incomingRoad")
        found = read.children(Child("laneLink", LaneLinkJunction, MANY))
        return cls(
            id=connection_id,
            incomingRoad=incoming_road,
            connectingRoad=connecting_road,
            contactPoint=contact_point,
            laneLinks=found["laneLink"],
        )

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("connectingRoad", self.connectingRoad),
            ("contactPoint", self.contactPoint),
            ("id", self.id),
            ("incomingRoad", self.incomingRoad),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        visitEach(visitor, "laneLink", self.laneLinks)


@dataclass
class Junction:
    """Defines an intersection of roads."""
    id: str
    name: Optional[str] = None
    type: Optional[JunctionType] = None
    connections: List[Connection] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        junction_id = read.attribute("id")
        name = read.attributeOpt("name")
        junction_type = read.attributeOpt("type", JunctionType)
        found = read.children(Child("connection", Connection, MANY))
        return cls(id=junction_id, name=name, type=junction_type, connections=found["connection"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("id", self.id), ("name", self.name), ("type", self.type)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        visitEach(visitor, "connection", self.connections)
