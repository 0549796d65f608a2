from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .events import DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class ReadOptions:
    """
    Knobs for the reader.

    ``maxDepth`` bounds element nesting, including inside skipped unknown
    elements.  ``strictProfiles`` makes the reader reject elevation and
    superelevation records whose ``s`` values are not strictly ascending
    (NaN included); by default they are stored in document order unchecked.
    """

    maxDepth: int = DEFAULT_MAX_DEPTH
    strictProfiles: bool = False


@dataclass(frozen=True)
class WriteOptions:
    # None writes everything on one line
    indent: Optional[str] = "  "
    xmlDeclaration: bool = True
    encoding: str = "utf-8"


DEFAULT_READ_OPTIONS = ReadOptions()
DEFAULT_WRITE_OPTIONS = WriteOptions()
