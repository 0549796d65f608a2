"""
Elevation and lateral profiles: piecewise cubic polynomials in ``s``.

Records are kept in document order.  The format requires strictly ascending
``s``; that is only enforced while reading when
``ReadOptions.strictProfiles`` is set, otherwise it is left to
:func:`OpenDriveStream.validation.validate`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Type, TypeVar

import numpy as np

from .attributes import attributePairs
from .context import ReadContext
from .dispatch import MANY, Child
from .entity import AttributeVisitor, ChildVisitor, visitEach
from .errors import InvalidValue

T = TypeVar("T")


def isStrictlyAscending(values: Iterable[float]) -> bool:
    s = np.asarray(list(values), dtype=float)
    return bool(np.all(np.diff(s) > 0.0))


def _check_ascending(read: ReadContext, records) -> None:
    if not read.options.strictProfiles:
        return
    s = np.asarray([r.s for r in records], dtype=float)
    # NaN compares false, so it counts as out of order
    bad = np.flatnonzero(~(np.diff(s) > 0.0))
    if bad.size:
        i = int(bad[0]) + 1
        raise InvalidValue("s", repr(float(s[i])), f"a value greater than {float(s[i - 1])!r} in <{read.tag}>")


@dataclass
class Elevation:
    """
    One ``<elevation>`` record.  Elevation at ``ds`` past ``s`` is
    ``a + b*ds + c*ds**2 + d*ds**3``.
    """
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
        visitor(attributePairs(
            ("a", self.a),
            ("b", self.b),
            ("c", self.c),
            ("d", self.d),
            ("s", self.s),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class Superelevation(Elevation):
    """Roll angle of the road cross section around the reference line, in radians."""


@dataclass
class Shape:
    """Lateral shape polynomial at ``s``, evaluated in ``t`` from ``t``."""
    s: float
    t: float
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
            t=read.attribute("t", float),
        ))

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor(attributePairs(
            ("a", self.a),
            ("b", self.b),
            ("c", self.c),
            ("d", self.d),
            ("s", self.s),
            ("t", self.t),
        ))

    def visitChildren(self, visitor: ChildVisitor) -> None:
        pass


@dataclass
class ElevationProfile:
    elevations: List[Elevation] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        found = read.children(Child("elevation", Elevation, MANY))
        _check_ascending(read, found["elevation"])
        return cls(elevations=found["elevation"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        visitEach(visitor, "elevation", self.elevations)


@dataclass
class LateralProfile:
    superelevations: List[Superelevation] = field(default_factory=list)
    shapes: List[Shape] = field(default_factory=list)

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        found = read.children(
            Child("superelevation", Superelevation, MANY),
            Child("shape", Shape, MANY),
        )
        _check_ascending(read, found["superelevation"])
        return cls(superelevations=found["superelevation"], shapes=found["shape"])

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        visitor([])

    def visitChildren(self, visitor: ChildVisitor) -> None:
        visitEach(visitor, "superelevation", self.superelevations)
        visitEach(visitor, "shape", self.shapes)
