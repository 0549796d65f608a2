"""Error types raised while reading or writing OpenDRIVE documents."""
from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """
    Base class for every failure raised while building a document from
    markup events.  ``code`` is a stable identifier suitable for tooling,
    the message is meant for humans.
    """

    code = "E_PARSE"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingAttribute(ParseError):
    code = "E_MISSING_ATTRIBUTE"

    def __init__(self, field: str) -> None:
        super().__init__(f"missing required attribute '{field}'")
        self.field = field


class InvalidValue(ParseError):
    """An attribute (or character content) could not be read as ``expected``."""

    code = "E_INVALID_VALUE"

    def __init__(self, field: str, raw: str, expected: str) -> None:
        super().__init__(f"invalid value {raw!r} for '{field}', expected {expected}")
        self.field = field
        self.raw = raw
        self.expected = expected


class MissingElement(ParseError):
    code = "E_MISSING_ELEMENT"

    def __init__(self, tag: str) -> None:
        super().__init__(f"missing required child element <{tag}>")
        self.tag = tag


class DuplicateElement(ParseError):
    code = "E_DUPLICATE_ELEMENT"

    def __init__(self, tag: str) -> None:
        super().__init__(f"child element <{tag}> may appear at most once")
        self.tag = tag


class UnexpectedChildElement(ParseError):
    code = "E_UNEXPECTED_CHILD"

    def __init__(self, tag: str, parent: Optional[str] = None) -> None:
        where = f" inside <{parent}>" if parent else ""
        super().__init__(f"unexpected child element <{tag}>{where}")
        self.tag = tag
        self.parent = parent


class UnexpectedElement(ParseError):
    """The document root is not the element we were asked to read."""

    code = "E_UNEXPECTED_ELEMENT"

    def __init__(self, tag: str, expected: str) -> None:
        super().__init__(f"expected <{expected}> but found <{tag}>")
        self.tag = tag
        self.expected = expected


class NestingTooDeep(ParseError):
    code = "E_NESTING"

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(f"element nesting depth {depth} exceeds limit of {limit}")
        self.depth = depth
        self.limit = limit


class MalformedMarkup(ParseError):
    """Raised for XML syntax errors and truncated event streams."""

    code = "E_MARKUP"

    def __init__(self, message: str, position: Optional[tuple] = None) -> None:
        super().__init__(message)
        self.position = position


class WriteError(ValueError):
    """A document cannot be written, e.g. a road without ``planView``."""

    code = "E_WRITE"

    def __init__(self, tag: str, message: str) -> None:
        super().__init__(f"<{tag}>: {message}")
        self.tag = tag
        self.message = message
