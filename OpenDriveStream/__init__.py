from .config import ReadOptions, WriteOptions
from .enums import (
    Access,
    BorderType,
    ContactPoint,
    ElementDir,
    ElementType,
    JunctionType,
    LaneChange,
    LaneType,
    ObjectType,
    Orientation,
    ParamPoly3Range,
    RoadMarkColor,
    RoadMarkType,
    Rule,
)
from .errors import (
    DuplicateElement,
    InvalidValue,
    MalformedMarkup,
    MissingAttribute,
    MissingElement,
    NestingTooDeep,
    ParseError,
    UnexpectedChildElement,
    UnexpectedElement,
    WriteError,
)
from .events import Characters, EndElement, StartElement, eventsFromElement, eventsFromSource, eventsFromString
from .geometry import Arc, Geometry, Line, ParamPoly3, PlanView, Poly3, Spiral
from .index import RoadNetworkIndex
from .junction import Connection, Junction, LaneLinkJunction
from .lane import Border, Lane, LaneGroup, LaneLink, LaneLinkEntry, LaneOffset, Lanes, LaneSection, RoadMark, Width
from .objects import Borders, Object, ObjectBorder, Objects, ParkingSpace
from .opendrive import GeoReference, Header, OpenDRIVE, parse, parseFile, parseFragment, parseString, serialize
from .parser import OpenDriveParser
from .profile import Elevation, ElevationProfile, LateralProfile, Shape, Superelevation
from .road import Link, PredecessorSuccessor, Road
from .units import Length, meters
from .validation import Issue, validate
from .writer import toElement, toString, writeFile
