"""Physical lengths.  OpenDRIVE stores every length as a bare number of metres."""
from __future__ import annotations

from dataclasses import dataclass

FEET_TO_METERS = 0.3048


@dataclass(frozen=True, order=True)
class Length:
    """A length along or across the reference line, held in metres."""

    meters: float

    @classmethod
    def fromMeters(cls, value: float) -> "Length":
        return cls(float(value))

    @classmethod
    def fromFeet(cls, value: float) -> "Length":
        return cls(float(value) * FEET_TO_METERS)

    def __float__(self) -> float:
        return self.meters

    def __repr__(self) -> str:
        return f"Length({self.meters!r} m)"


def meters(value: float) -> Length:
    return Length.fromMeters(value)
