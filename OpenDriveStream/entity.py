from __future__ import annotations

from typing import Callable, List, Protocol, Tuple, Type, TypeVar

from .context import ReadContext

T = TypeVar("T")

AttributeVisitor = Callable[[List[Tuple[str, str]]], None]
ChildVisitor = Callable[[str, "Entity"], None]


class Entity(Protocol):
    """
    What every element type provides.  There is no common base class;
    the reader and writer only rely on these three methods.
    """

    @classmethod
    def fromRead(cls: Type[T], read: ReadContext) -> T:
        ...

    def visitAttributes(self, visitor: AttributeVisitor) -> None:
        ...

    def visitChildren(self, visitor: ChildVisitor) -> None:
        ...


def visitEach(visitor: ChildVisitor, tag: str, children) -> None:
    for child in children:
        visitor(tag, child)
