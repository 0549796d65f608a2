"""Road objects (``<objects>``), with parking space details and object borders."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Type, TypeVar

from .attributes import attributePairs
from .context import ReadContext
from .dispatch import MANY, ONE_OR_MORE, Child
from .entity import AttributeVisitor, ChildVisitor, visitEach
from .enums import Access, BorderType, ObjectType, Orientation
from .errors import WriteError
from .units import Length

T = TypeVar("T")


@dataclass
class ParkingSpace:
    """Details for a parking space object."""
    access: Access
    # free text, depending on application
    restrictions: Optional[str] = None

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        # older revisions nest <marking> records here; they are skipped
        return cls(
            access=read.attribute("access", Access),
            restrictions=read.attributeOpt("restrictions"),
        )

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("access", self.access), ("restrictions", self.restrictions)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class ObjectBorder:
    """A border (curb or concrete edge) drawn along one of the object's outlines."""
    width: Length
    type: BorderType
    outlineId: int
    useCompleteOutline: Optional[bool] = None

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return cls(
            outlineId=read.attribute("outlineId", int),
            type=read.attribute("type", BorderType),
            useCompleteOutline=read.attributeOpt("useCompleteOutline", bool),
            width=read.attribute("width", Length),
        )

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("outlineId", self.outlineId),
            ("type", self.type),
            ("useCompleteOutline", self.useCompleteOutline),
            ("width", self.width),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Borders:
    borders: List[ObjectBorder] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return cls(borders=read.children(Child("border", ObjectBorder, ONE_OR_MORE))["border"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if not self.borders:
            raise WriteError("borders", "at least one border is required")
        visitEach(visitor, "border", self.borders)


@dataclass
class Object:
    """Represents an ``<object>`` placed at (s, t) relative to the road."""
    id: str
    s: float
    t: float
    zOffset: float
    type: Optional[ObjectType] = None
    name: Optional[str] = None
    length: Optional[Length] = None
    width: Optional[Length] = None
    height: Optional[Length] = None
    hdg: Optional[float] = None
    orientation: Optional[Orientation] = None
    parkingSpace: Optional[ParkingSpace] = None
    borders: Optional[Borders] = None

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        values = dict(
            hdg=read.attributeOpt("hdg", float),
            height=read.attributeOpt("height", Length),
            id=read.attribute("id"),
            length=read.attributeOpt("length", Length),
            name=read.attributeOpt("name"),
            orientation=read.attributeOpt("orientation", Orientation),
            s=read.attribute("s", float),
            t=read.attribute("t", float),
            type=read.attributeOpt("type", ObjectType),
            width=read.attributeOpt("width", Length),
            zOffset=read.attribute("zOffset", float),
        )
        found = read.children(
            Child("parkingSpace", ParkingSpace),
            Child("borders", Borders),
        )
        return cls(parkingSpace=found["parkingSpace"], borders=found["borders"], **values)

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("hdg", self.hdg),
            ("height", self.height),
            ("id", self.id),
            ("length", self.length),
            ("name", self.name),
            ("orientation", self.orientation),
            ("s", self.s),
            ("t", self.t),
            ("type", self.type),
            ("width", self.width),
            ("zOffset", self.zOffset),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if self.parkingSpace is not None:
            visitor("parkingSpace", self.parkingSpace)
        if self.borders is not None:
            visitor("borders", self.borders)


@dataclass
class Objects:
    objects: List[Object] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return cls(objects=read.children(Child("object", Object, MANY))["object"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        visitEach(visitor, "object", self.objects)
