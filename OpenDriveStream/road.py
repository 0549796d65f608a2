from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type, TypeVar

from .attributes import attributePairs
from .context import ReadContext
from .dispatch import REQUIRED, Child
from .entity import AttributeVisitor, ChildVisitor
from .enums import ContactPoint, ElementDir, ElementType, Rule
from .errors import WriteError
from .geometry import PlanView
from .lane import Lanes
from .objects import Objects
from .profile import ElevationProfile, LateralProfile
from .units import Length

T = TypeVar("T")


@dataclass
class PredecessorSuccessor:
    """
    One edge of the road linkage graph, read from ``<predecessor>`` or
    ``<successor>``.

    ``elementId`` names a road or junction by id; nothing is resolved here.
    ``contactPoint`` and ``elementS`` are alternative anchors (``elementS``
    for virtual junctions, roads only) and ``elementDir`` belongs with
    ``elementS``.  Combinations are not checked while reading, see
    :func:`OpenDriveStream.validation.validate`.
    """

    elementId: str
    elementType: Optional[ElementType] = None
    contactPoint: Optional[ContactPoint] = None
    elementDir: Optional[ElementDir] = None
    elementS: Optional[Length] = None

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(
            contactPoint=read.attributeOpt("contactPoint", ContactPoint),
            elementDir=read.attributeOpt("elementDir", ElementDir),
            elementId=read.attribute("elementId"),
            elementS=read.attributeOpt("elementS", Length),
            elementType=read.attributeOpt("elementType", ElementType),
        ))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("contactPoint", self.contactPoint),
            ("elementDir", self.elementDir),
            ("elementId", self.elementId),
            ("elementS", self.elementS),
            ("elementType", self.elementType),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Link:
    """Follows the road header if the road has a predecessor or successor.  Isolated roads omit it."""
    predecessor: Optional[PredecessorSuccessor] = None
    successor: Optional[PredecessorSuccessor] = None

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        found = read.children(
            Child("predecessor", PredecessorSuccessor),
            Child("successor", PredecessorSuccessor),
        )
        return cls(predecessor=found["predecessor"], successor=found["successor"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if self.predecessor is not None:
            visitor("predecessor", self.predecessor)
        if self.successor is not None:
            visitor("successor", self.successor)


@dataclass
class Road:
    """
    A ``<road>``: one stretch of road running along a single reference line.

    ``junction`` is ``"-1"`` unless the road is a connecting road inside the
    junction with that id.  ``rule`` is kept exactly as read; use
    :attr:`trafficRule` for the effective rule (right-hand traffic when absent).
    ``planView`` and ``lanes`` are always set on a parsed road; they are only
    optional here so a road can be assembled piece by piece.
    """

    id: str
    length: Length
    junction: str = "-1"
    name: Optional[str] = None
    rule: Optional[Rule] = None
    link: Optional[Link] = None
    planView: Optional[PlanView] = None
    elevationProfile: Optional[ElevationProfile] = None
    lateralProfile: Optional[LateralProfile] = None
    lanes: Optional[Lanes] = None
    objects: Optional[Objects] = None

    @property
    def trafficRule(self) -> Rule:
        return self.rule if self.rule is not None else Rule.RIGHT_HAND_TRAFFIC

    @property
    def isConnectingRoad(self) -> bool:
        return self.junction != "-1"

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        road_id = read.attribute("id")
        junction = read.attribute("junction")
        length = read.attribute("length", Length)
        name = read.attributeOpt("name")
        rule = read.attributeOpt("rule", Rule)
        found = read.children(
            Child("link", Link),
            Child("planView", PlanView, REQUIRED),
            Child("elevationProfile", ElevationProfile),
            Child("lateralProfile", LateralProfile),
            Child("lanes", Lanes, REQUIRED),
            Child("objects", Objects),
        )
        return cls(
            id=road_id,
            junction=junction,
            length=length,
            name=name,
            rule=rule,
            link=found["link"],
            planView=found["planView"],
            elevationProfile=found["elevationProfile"],
            lateralProfile=found["lateralProfile"],
            lanes=found["lanes"],
            objects=found["objects"],
        )

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("id", self.id),
            ("junction", self.junction),
            ("length", self.length),
            ("name", self.name),
            ("rule", self.rule),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if self.planView is None:
            raise WriteError("road", f"road {self.id!r} has no planView")
        if self.lanes is None:
            raise WriteError("road", f"road {self.id!r} has no lanes")
        if self.link is not None:
            visitor("link", self.link)
        visitor("planView", self.planView)
        if self.elevationProfile is not None:
            visitor("elevationProfile", self.elevationProfile)
        if self.lateralProfile is not None:
            visitor("lateralProfile", self.lateralProfile)
        visitor("lanes", self.lanes)
        if self.objects is not None:
            visitor("objects", self.objects)
