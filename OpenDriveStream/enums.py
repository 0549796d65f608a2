"""
Closed sets of attribute tokens.

Each member's value is the canonical token written back to markup.  Reading
matches tokens ASCII case-insensitively; anything else is an
:class:`~OpenDriveStream.errors.InvalidValue`.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Type, TypeVar

from .errors import InvalidValue

E = TypeVar("E", bound="TokenEnum")

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


class TokenEnum(Enum):

    @classmethod
    def _tokens(cls) -> Dict[str, "TokenEnum"]:
        table = cls.__dict__.get("_token_table")
        if table is None:
            table = {member.value.translate(_ASCII_LOWER): member for member in cls}
            setattr(cls, "_token_table", table)
        return table

    @classmethod
    def parse(cls: Type[E], token: str, field: str = "") -> E:
        member = cls._tokens().get(token.translate(_ASCII_LOWER))
        if member is None:
            raise InvalidValue(field or cls.__name__, token, cls.describe())
        return member

    @classmethod
    def describe(cls) -> str:
        return "one of " + ", ".join(repr(m.value) for m in cls)

    def asStr(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class ElementType(TokenEnum):
    """Type of the element a road link points at."""
    ROAD = "road"
    JUNCTION = "junction"


class Rule(TokenEnum):
    """Basic traffic rule of a road.  An absent rule means right-hand traffic."""
    RIGHT_HAND_TRAFFIC = "RHT"
    LEFT_HAND_TRAFFIC = "LHT"


class ContactPoint(TokenEnum):
    START = "start"
    END = "end"


class ElementDir(TokenEnum):
    PLUS = "+"
    MINUS = "-"


class Access(TokenEnum):
    """
    Access definitions for a parking space.  Spaces tagged ``women`` and
    ``handicapped`` are for vehicles of type car.
    """
    ALL = "all"
    CAR = "car"
    WOMEN = "women"
    HANDICAPPED = "handicapped"
    BUS = "bus"
    TRUCK = "truck"
    ELECTRIC = "electric"
    RESIDENTS = "residents"


class BorderType(TokenEnum):
    CONCRETE = "concrete"
    CURB = "curb"


class LaneType(TokenEnum):
    SHOULDER = "shoulder"
    BORDER = "border"
    DRIVING = "driving"
    STOP = "stop"
    NONE = "none"
    RESTRICTED = "restricted"
    PARKING = "parking"
    MEDIAN = "median"
    BIKING = "biking"
    SIDEWALK = "sidewalk"
    CURB = "curb"
    EXIT = "exit"
    ENTRY = "entry"
    ON_RAMP = "onRamp"
    OFF_RAMP = "offRamp"
    CONNECTING_RAMP = "connectingRamp"
    BIDIRECTIONAL = "bidirectional"
    SPECIAL1 = "special1"
    SPECIAL2 = "special2"
    SPECIAL3 = "special3"
    ROAD_WORKS = "roadWorks"
    TRAM = "tram"
    RAIL = "rail"
    BUS = "bus"
    TAXI = "taxi"
    HOV = "HOV"
    MWY_ENTRY = "mwyEntry"
    MWY_EXIT = "mwyExit"


class RoadMarkType(TokenEnum):
    NONE = "none"
    SOLID = "solid"
    BROKEN = "broken"
    SOLID_SOLID = "solid solid"
    SOLID_BROKEN = "solid broken"
    BROKEN_SOLID = "broken solid"
    BROKEN_BROKEN = "broken broken"
    BOTTS_DOTS = "botts dots"
    GRASS = "grass"
    CURB = "curb"
    CUSTOM = "custom"
    EDGE = "edge"


class RoadMarkColor(TokenEnum):
    STANDARD = "standard"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"
    ORANGE = "orange"
    VIOLET = "violet"
    BLACK = "black"


class LaneChange(TokenEnum):
    INCREASE = "increase"
    DECREASE = "decrease"
    BOTH = "both"
    NONE = "none"


class ObjectType(TokenEnum):
    NONE = "none"
    OBSTACLE = "obstacle"
    POLE = "pole"
    TREE = "tree"
    VEGETATION = "vegetation"
    BARRIER = "barrier"
    BUILDING = "building"
    PARKING_SPACE = "parkingSpace"
    PATCH = "patch"
    RAILING = "railing"
    TRAFFIC_ISLAND = "trafficIsland"
    CROSSWALK = "crosswalk"
    STREET_LAMP = "streetLamp"
    GANTRY = "gantry"
    SOUND_BARRIER = "soundBarrier"
    ROAD_MARK = "roadMark"


class Orientation(TokenEnum):
    PLUS = "+"
    MINUS = "-"
    NONE = "none"


class JunctionType(TokenEnum):
    DEFAULT = "default"
    VIRTUAL = "virtual"
    DIRECT = "direct"
    CROSSING = "crossing"


class ParamPoly3Range(TokenEnum):
    ARC_LENGTH = "arcLength"
    NORMALIZED = "normalized"
