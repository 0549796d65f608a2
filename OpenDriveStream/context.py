"""The object every entity's ``fromRead`` receives."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, TypeVar

from . import attributes as attrs
from .config import DEFAULT_READ_OPTIONS, ReadOptions
from .dispatch import Children, dispatchChildren
from .errors import UnexpectedChildElement
from .events import Characters, EndElement, EventCursor, StartElement

V = TypeVar("V")


class ReadContext:
    """
    A live event cursor positioned just inside ``<tag ...>`` together with
    that element's attributes.  The children have not been consumed yet.
    """

    cursor = None
    tag = None
    attributes = None
    options = None
    closed = False
    text_content = None

    def __init__(self, cursor: EventCursor, tag: str, attributes: Dict[str, str], options: ReadOptions = DEFAULT_READ_OPTIONS):
        self.cursor = cursor
        self.tag = tag
        self.attributes = attributes
        self.options = options
        self.closed = False
        self.text_content = None

    def attribute(self, name: str, kind: Any = str):
        return attrs.attribute(self.attributes, name, kind)

    def attributeOpt(self, name: str, kind: Any = str):
        return attrs.attributeOpt(self.attributes, name, kind)

    def children(self, *rules) -> Children:
        return dispatchChildren(self, rules)

    def expectingNoChildElementsFor(self, value: V) -> V:
        """Consume up to the end tag, failing if a child element appears, then return ``value``."""
        text: List[str] = []
        while not self.closed:
            event = self.cursor.next()
            if isinstance(event, StartElement):
                raise UnexpectedChildElement(event.name, self.tag)
            if isinstance(event, Characters):
                text.append(event.text)
            elif isinstance(event, EndElement):
                self.markClosed("".join(text) if text else event.text)
        return value

    def text(self) -> str:
        """Character content of the element; child elements are skipped."""
        if not self.closed:
            self.children()
        return self.text_content or ""

    def skip(self) -> None:
        """Discard whatever is left of this element."""
        if not self.closed:
            self.cursor.skipElement()
            self.markClosed(None)

    def markClosed(self, text: Optional[str]) -> None:
        self.closed = True
        self.text_content = text

    def childContext(self, event: StartElement) -> "ReadContext":
        return ReadContext(self.cursor, event.name, event.attributes, self.options)
