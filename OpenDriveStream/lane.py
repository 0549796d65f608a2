"""Cross-section lane layout of a road: ``<lanes>`` and everything below it."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Type, TypeVar

from .attributes import attributePairs
from .context import ReadContext
from .dispatch import MANY, ONE_OR_MORE, REQUIRED, Child
from .entity import AttributeVisitor, ChildVisitor, visitEach
from .enums import LaneChange, LaneType, RoadMarkColor, RoadMarkType
from .errors import WriteError
from .units import Length

T = TypeVar("T")


@dataclass
class LaneOffset:
    """Lateral shift of the lane reference line, a cubic polynomial in ``s``."""
    s: float
    a: float
    b: float
    c: float
    d: float

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(
            a=read.attribute("a", float),
            b=read.attribute("b", float),
            c=read.attribute("c", float),
            d=read.attribute("d", float),
            s=read.attribute("s", float),
        ))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("a", self.a), ("b", self.b), ("c", self.c), ("d", self.d), ("s", self.s)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Width:
    """Lane width polynomial starting ``sOffset`` into the lane section."""
    sOffset: float
    a: float
    b: float
    c: float
    d: float

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(
            a=read.attribute("a", float),
            b=read.attribute("b", float),
            c=read.attribute("c", float),
            d=read.attribute("d", float),
            sOffset=read.attribute("sOffset", float),
        ))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("a", self.a), ("b", self.b), ("c", self.c), ("d", self.d), ("sOffset", self.sOffset)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Border(Width):
    """Outer lane border polynomial; an alternative to ``<width>``."""


@dataclass
class RoadMark:
    sOffset: float
    type: RoadMarkType
    color: Optional[RoadMarkColor] = None
    width: Optional[Length] = None
    height: Optional[Length] = None
    laneChange: Optional[LaneChange] = None

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        # type/line sub-elements are not modelled and get skipped
        return cls(
            color=read.attributeOpt("color", RoadMarkColor),
            height=read.attributeOpt("height", Length),
            laneChange=read.attributeOpt("laneChange", LaneChange),
            sOffset=read.attribute("sOffset", float),
            type=read.attribute("type", RoadMarkType),
            width=read.attributeOpt("width", Length),
        )

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("color", self.color),
            ("height", self.height),
            ("laneChange", self.laneChange),
            ("sOffset", self.sOffset),
            ("type", self.type),
            ("width", self.width),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class LaneLinkEntry:
    id: int

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(id=read.attribute("id", int)))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("id", self.id)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class LaneLink:
    """Lane ids this lane continues from / into on the neighbouring road or section."""
    predecessors: List[LaneLinkEntry] = field(default_factory=list)
    successors: List[LaneLinkEntry] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        found = read.children(
            Child("predecessor", LaneLinkEntry, MANY),
            Child("successor", LaneLinkEntry, MANY),
        )
        return cls(predecessors=found["predecessor"], successors=found["successor"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        visitEach(visitor, "predecessor", self.predecessors)
        visitEach(visitor, "successor", self.successors)


@dataclass
class Lane:
    """
    A single ``<lane>``.  Ids are positive on the left, negative on the right
    and 0 for the center lane.
    """
    id: int
    type: LaneType
    level: Optional[bool] = None
    link: Optional[LaneLink] = None
    widths: List[Width] = field(default_factory=list)
    borders: List[Border] = field(default_factory=list)
    roadMarks: List[RoadMark] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        lane_id = read.attribute("id", int)
        level = read.attributeOpt("level", bool)
        lane_type = read.attribute("type", LaneType)
        found = read.children(
            Child("link", LaneLink),
            Child("width", Width, MANY),
            Child("border", Border, MANY),
            Child("roadMark", RoadMark, MANY),
        )
        return cls(
            id=lane_id,
            type=lane_type,
            level=level,
            link=found["link"],
            widths=found["width"],
            borders=found["border"],
            roadMarks=found["roadMark"],
        )

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("id", self.id), ("level", self.level), ("type", self.type)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if self.link is not None:
            visitor("link", self.link)
        visitEach(visitor, "width", self.widths)
        visitEach(visitor, "border", self.borders)
        visitEach(visitor, "roadMark", self.roadMarks)


@dataclass
class LaneGroup:
    """The lanes on one side (``left``, ``center`` or ``right``) of a lane section."""
    lanes: List[Lane] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return cls(lanes=read.children(Child("lane", Lane, ONE_OR_MORE))["lane"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if not self.lanes:
            raise WriteError("lane", "a lane group needs at least one lane")
        visitEach(visitor, "lane", self.lanes)


@dataclass
class LaneSection:
    s: float
    center: LaneGroup
    singleSide: Optional[bool] = None
    left: Optional[LaneGroup] = None
    right: Optional[LaneGroup] = None

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        s = read.attribute("s", float)
        single_side = read.attributeOpt("singleSide", bool)
        found = read.children(
            Child("left", LaneGroup),
            Child("center", LaneGroup, REQUIRED),
            Child("right", LaneGroup),
        )
        return cls(s=s, singleSide=single_side, left=found["left"], center=found["center"], right=found["right"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("s", self.s), ("singleSide", self.singleSide)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if self.center is None:
            raise WriteError("laneSection", f"lane section at s={self.s!r} has no center lanes")
        if self.left is not None:
            visitor("left", self.left)
        visitor("center", self.center)
        if self.right is not None:
            visitor("right", self.right)


@dataclass
class Lanes:
    """Container for lane offsets and lane sections."""
    laneSections: List[LaneSection] = field(default_factory=list)
    laneOffsets: List[LaneOffset] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        found = read.children(
            Child("laneOffset", LaneOffset, MANY),
            Child("laneSection", LaneSection, ONE_OR_MORE),
        )
        return cls(laneSections=found["laneSection"], laneOffsets=found["laneOffset"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if not self.laneSections:
            raise WriteError("lanes", "at least one laneSection is required")
        visitEach(visitor, "laneOffset", self.laneOffsets)
        visitEach(visitor, "laneSection", self.laneSections)
