"""
Reference line geometry: ``<planView>`` and its ``<geometry>`` records.

Only the data is modelled; evaluating positions along the curves is left to
consumers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Type, TypeVar, Union

from .attributes import attributePairs
from .context import ReadContext
from .dispatch import ONE_OR_MORE, Child, Choice
from .entity import AttributeVisitor, ChildVisitor, visitEach
from .enums import ParamPoly3Range
from .errors import WriteError
from .units import Length

T = TypeVar("T")


@dataclass
class Line:
    """Straight line."""
    tag = "line"

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls())

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Arc:
    """Arc of constant curvature (1/m, positive turns left)."""
    curvature: float
    tag = "arc"

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(curvature=read.attribute("curvature", float)))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(("curvature", self.curvature)))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Spiral:
    """Clothoid with linearly changing curvature."""
    curvStart: float
    curvEnd: float
    tag = "spiral"

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(
            curvStart=read.attribute("curvStart", float),
            curvEnd=read.attribute("curvEnd", float),
        ))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("curvEnd", self.curvEnd),
            ("curvStart", self.curvStart),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Poly3:
    """Cubic polynomial in the local u/v frame."""
    a: float
    b: float
    c: float
    d: float
    tag = "poly3"

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(
            a=read.attribute("a", float),
            b=read.attribute("b", float),
            c=read.attribute("c", float),
            d=read.attribute("d", float),
        ))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("a", self.a),
            ("b", self.b),
            ("c", self.c),
            ("d", self.d),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class ParamPoly3:
    """Parametric cubic curve u(p), v(p)."""
    aU: float
    bU: float
    cU: float
    dU: float
    aV: float
    bV: float
    cV: float
    dV: float
    pRange: Optional[ParamPoly3Range] = None
    tag = "paramPoly3"

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        return read.expectingNoChildElementsFor(cls(
            aU=read.attribute("aU", float),
            bU=read.attribute("bU", float),
            cU=read.attribute("cU", float),
            dU=read.attribute("dU", float),
            aV=read.attribute("aV", float),
            bV=read.attribute("bV", float),
            cV=read.attribute("cV", float),
            dV=read.attribute("dV", float),
            pRange=read.attributeOpt("pRange", ParamPoly3Range),
        ))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("aU", self.aU),
            ("aV", self.aV),
            ("bU", self.bU),
            ("bV", self.bV),
            ("cU", self.cU),
            ("cV", self.cV),
            ("dU", self.dU),
            ("dV", self.dV),
            ("pRange", self.pRange),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


GeometryShape = Union[Line, Arc, Spiral, Poly3, ParamPoly3]

SHAPES = {shape.tag: shape for shape in (Line, Arc, Spiral, Poly3, ParamPoly3)}


@dataclass
class Geometry:
    """A ``<geometry>`` record: start pose, length and exactly one shape."""
    s: float
    x: float
    y: float
    hdg: float
    length: Length
    shape: GeometryShape

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        hdg = read.attribute("hdg", float)
        length = read.attribute("length", Length)
        s = read.attribute("s", float)
        x = read.attribute("x", float)
        y = read.attribute("y", float)
        found = read.children(Choice("shape", SHAPES))
        return cls(s=s, x=x, y=y, hdg=hdg, length=length, shape=found["shape"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("hdg", self.hdg),
            ("length", self.length),
            ("s", self.s),
            ("x", self.x),
            ("y", self.y),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if self.shape is None:
            raise WriteError("geometry", f"geometry at s={self.s!r} has no shape")
        visitor(self.shape.tag, self.shape)


@dataclass
class PlanView:
    """Sequence of geometry records making up the reference line."""
    geometries: List[Geometry] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        found = read.children(Child("geometry", Geometry, ONE_OR_MORE))
        return cls(geometries=found["geometry"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        if not self.geometries:
            raise WriteError("planView", "at least one geometry is required")
        visitEach(visitor, "geometry", self.geometries)
