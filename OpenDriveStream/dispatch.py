"""
Child element dispatch.

A composite entity describes its children with an explicit, ordered table of
rules.  :func:`dispatchChildren` walks the events up to the end of the
enclosing element, routes every child start tag to its handler, enforces the
declared cardinality and skips (with depth tracking) any element the table
does not know about, so documents written against newer revisions of the
format still load.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional, Tuple

from .errors import DuplicateElement, MissingElement
from .events import Characters, EndElement

if TYPE_CHECKING:
    from .context import ReadContext

logger = logging.getLogger(__name__)


class Cardinality(Enum):
    OPTIONAL = "0..1"
    REQUIRED = "1"
    MANY = "0..n"
    ONE_OR_MORE = "1..n"

    @property
    def required(self) -> bool:
        return self in (Cardinality.REQUIRED, Cardinality.ONE_OR_MORE)

    @property
    def repeats(self) -> bool:
        return self in (Cardinality.MANY, Cardinality.ONE_OR_MORE)


OPTIONAL = Cardinality.OPTIONAL
REQUIRED = Cardinality.REQUIRED
MANY = Cardinality.MANY
ONE_OR_MORE = Cardinality.ONE_OR_MORE


@dataclass
class Child:
    """
    One row of a dispatch table.

    ``handler`` is either an entity class (its ``fromRead`` is called) or any
    callable taking a :class:`ReadContext`.  Results are stored under ``key``,
    which defaults to the tag.
    """

    tag: str
    handler: Any
    cardinality: Cardinality = OPTIONAL
    key: Optional[str] = None

    def __post_init__(self):
        if self.key is None:
            self.key = self.tag

    @property
    def label(self) -> str:
        return self.tag

    def entries(self) -> Iterable[Tuple[str, Any]]:
        return [(self.tag, self.handler)]


@dataclass
class Choice:
    """Several alternative tags that together fill a single slot."""

    key: str
    options: Dict[str, Any] = field(default_factory=dict)
    cardinality: Cardinality = REQUIRED

    @property
    def label(self) -> str:
        return "|".join(self.options)

    def entries(self) -> Iterable[Tuple[str, Any]]:
        return self.options.items()


class Children(dict):
    """Dispatch results keyed by rule key; repeated rules map to lists."""


def _invoke(handler: Any, read: "ReadContext") -> Any:
    from_read: Optional[Callable] = getattr(handler, "fromRead", None)
    if from_read is not None:
        return from_read(read)
    return handler(read)


def dispatchChildren(read: "ReadContext", rules: Iterable[Any]) -> Children:
    """
    Consume the remaining children of ``read``'s element, including its end
    event.  Raises :class:`MissingElement` for required rules that never fired
    and :class:`DuplicateElement` when a singular rule fires twice.
    """
    rules = list(rules)
    table: Dict[str, Tuple[Any, Any]] = {}
    for rule in rules:
        for tag, handler in rule.entries():
            table[tag] = (rule, handler)

    found = Children()
    counts: Dict[str, int] = {rule.key: 0 for rule in rules}
    text: List[str] = []
    while True:
        event = read.cursor.next()
        if isinstance(event, EndElement):
            read.markClosed("".join(text) if text else event.text)
            break
        if isinstance(event, Characters):
            text.append(event.text)
            continue
        entry = table.get(event.name)
        if entry is None:
            logger.debug("skipping unknown element <%s> inside <%s>", event.name, read.tag)
            read.cursor.skipElement()
            continue
        rule, handler = entry
        if counts[rule.key] and not rule.cardinality.repeats:
            raise DuplicateElement(event.name)
        child = read.childContext(event)
        value = _invoke(handler, child)
        child.skip()
        counts[rule.key] += 1
        if rule.cardinality.repeats:
            found.setdefault(rule.key, []).append(value)
        else:
            found[rule.key] = value

    for rule in rules:
        if counts[rule.key] == 0:
            if rule.cardinality.required:
                raise MissingElement(rule.label)
            found[rule.key] = [] if rule.cardinality.repeats else None
    return found
