"""
Visitor-based serialization.

Entities never build XML themselves.  Each one reports its attributes as an
ordered list of ``(name, text)`` pairs through ``visitAttributes`` and hands
every present child to ``visitChildren``'s visitor as ``(tag, entity)``.
:class:`XODRWriter` turns those callbacks into ``start``/``data``/``end``
calls on a sink with the shape of ``xml.etree.ElementTree.TreeBuilder``.
"""
from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from typing import Any, List, Protocol, Tuple

from .config import DEFAULT_WRITE_OPTIONS, WriteOptions

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="{encoding}"?>\n'


class EventSink(Protocol):
    def start(self, tag: str, attrs: dict) -> Any:
        ...

    def data(self, data: str) -> Any:
        ...

    def end(self, tag: str) -> Any:
        ...


class XODRWriter:
    sink = None

    def __init__(self, sink: EventSink):
        self.sink = sink

    def visit(self, tag: str, entity: Any) -> None:
        pairs: List[Tuple[str, str]] = []
        entity.visitAttributes(pairs.extend)
        self.sink.start(tag, dict(pairs))
        visit_text = getattr(entity, "visitText", None)
        if visit_text is not None:
            visit_text(self.sink.data)
        entity.visitChildren(self.visit)
        self.sink.end(tag)


def serialize(document: Any, sink: EventSink, tag: str = "OpenDRIVE") -> None:
    """Emit ``document`` to ``sink`` as markup events, top down."""
    XODRWriter(sink).visit(tag, document)


def toElement(entity: Any, tag: str = "OpenDRIVE") -> ET.Element:
    builder = ET.TreeBuilder()
    serialize(entity, builder, tag)
    return builder.close()


def toString(entity: Any, options: WriteOptions = DEFAULT_WRITE_OPTIONS, tag: str = "OpenDRIVE") -> str:
    elem = toElement(entity, tag)
    if options.indent:
        ET.indent(elem, space=options.indent)
    text = ET.tostring(elem, encoding="unicode")
    if options.xmlDeclaration:
        text = XML_DECLARATION.format(encoding=options.encoding.upper()) + text
    return text + "\n"


def writeFile(document: Any, xodr_path, options: WriteOptions = DEFAULT_WRITE_OPTIONS) -> None:
    text = toString(document, options)
    with open(os.fspath(xodr_path), "w", encoding=options.encoding) as f:
        f.write(text)
    logger.debug("wrote %s (%d characters)", xodr_path, len(text))
