"""
Markup events and the cursor that walks them.

The reader never looks at an element tree.  It consumes a flat stream of
``StartElement`` / ``Characters`` / ``EndElement`` events, which may come from
:func:`eventsFromSource` (built on ``xml.etree.ElementTree.XMLPullParser``) or be
produced by any other tokenizer.
"""
from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .errors import MalformedMarkup, NestingTooDeep

DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True)
class StartElement:
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Characters:
    text: str


@dataclass(frozen=True)
class EndElement:
    name: str
    # the pull parser only knows an element's character content once it has ended
    text: Optional[str] = None


Event = Union[StartElement, Characters, EndElement]


def _strip_ns(tag: str) -> str:
    """Drop a ``{namespace}`` prefix from an element or attribute name."""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


CHUNK_SIZE = 64 * 1024


def _drain(parser: ET.XMLPullParser, open_elements: List[ET.Element]) -> Iterator[Event]:
    for kind, element in parser.read_events():
        tag = _strip_ns(element.tag)
        if kind == "start":
            open_elements.append(element)
            yield StartElement(tag, {_strip_ns(k): v for k, v in element.attrib.items()})
        else:
            yield EndElement(tag, element.text)
            open_elements.pop()
            element.clear()
            # detach it so ancestors do not keep every finished child
            if open_elements:
                open_elements[-1].remove(element)


def _pullEvents(chunks: Iterable[Union[str, bytes]]) -> Iterator[Event]:
    """
    Run ``chunks`` through ``ET.XMLPullParser``.  Byte chunks are decoded as
    the XML declaration says; text chunks are taken as already decoded.
    """
    parser = ET.XMLPullParser(events=("start", "end"))
    open_elements: List[ET.Element] = []
    try:
        for chunk in chunks:
            parser.feed(chunk)
            yield from _drain(parser, open_elements)
        parser.close()
        yield from _drain(parser, open_elements)
    except ET.ParseError as exc:
        raise MalformedMarkup(f"malformed markup: {exc}", getattr(exc, "position", None)) from exc


def _readChunks(stream) -> Iterator[Union[str, bytes]]:
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            return
        yield chunk


def _fileEvents(xodr_path) -> Iterator[Event]:
    with open(os.fspath(xodr_path), "rb") as f:
        yield from _pullEvents(_readChunks(f))


def eventsFromSource(source) -> Iterator[Event]:
    """
    Yield markup events from a path, a binary/text file object or raw bytes.

    Finished elements are cleared and detached from their parent, so memory
    stays bounded by the nesting depth of the document rather than its size.
    XML syntax errors are re-raised as :class:`MalformedMarkup`.
    """
    if isinstance(source, (bytes, bytearray)):
        return _pullEvents([bytes(source)])
    if isinstance(source, (str, os.PathLike)):
        return _fileEvents(source)
    return _pullEvents(_readChunks(source))


def eventsFromString(text: Union[str, bytes]) -> Iterator[Event]:
    """
    Yield markup events from a document held in memory.  A ``str`` is taken
    as already decoded, whatever encoding its XML declaration names.
    """
    if isinstance(text, str):
        return _pullEvents([text])
    return eventsFromSource(text)


class EventCursor:
    """
    Exclusive, forward-only cursor over an event stream.

    Tracks element depth so the reader can refuse adversarial nesting before
    it exhausts the interpreter stack.
    """

    events = None
    depth = None
    max_depth = None

    def __init__(self, events: Iterable[Event], max_depth: int = DEFAULT_MAX_DEPTH):
        self.events = iter(events)
        self.depth = 0
        self.max_depth = max_depth

    def next(self) -> Event:
        try:
            event = next(self.events)
        except StopIteration:
            raise MalformedMarkup(f"event stream ended inside an open element at depth {self.depth}")
        if isinstance(event, StartElement):
            self.depth += 1
            if self.depth > self.max_depth:
                raise NestingTooDeep(self.depth, self.max_depth)
        elif isinstance(event, EndElement):
            self.depth -= 1
        return event

    def skipElement(self) -> None:
        """Consume events up to and including the end of the element just opened."""
        level = 1
        while level:
            event = self.next()
            if isinstance(event, StartElement):
                level += 1
            elif isinstance(event, EndElement):
                level -= 1

    def nextStart(self) -> StartElement:
        """Return the first start event, ignoring leading character data."""
        while True:
            event = self.next()
            if isinstance(event, StartElement):
                return event
            if isinstance(event, EndElement):
                raise MalformedMarkup(f"unexpected end of <{event.name}> before any element")

    def finish(self) -> None:
        """Make sure nothing but character data follows the root element."""
        for event in self.events:
            if not isinstance(event, Characters):
                raise MalformedMarkup(f"unexpected {type(event).__name__} after the root element")


def eventsFromElement(element: ET.Element) -> Iterator[Event]:
    """Replay an already built element tree as markup events."""
    yield StartElement(_strip_ns(element.tag), {_strip_ns(k): v for k, v in element.attrib.items()})
    if element.text:
        yield Characters(element.text)
    for child in element:
        yield from eventsFromElement(child)
        if child.tail:
            yield Characters(child.tail)
    yield EndElement(_strip_ns(element.tag))
