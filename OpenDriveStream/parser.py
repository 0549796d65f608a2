import logging

from . import opendrive
from .config import DEFAULT_READ_OPTIONS

logger = logging.getLogger(__name__)


class OpenDriveParser:
    opendrive_data = None
    xodr_path = None
    options = None

    def __init__(self, xodr_path, options=DEFAULT_READ_OPTIONS):
        self.opendrive_data = None
        self.xodr_path = xodr_path
        self.options = options

    def parseOpenDriveFile(self):
        """Load ``xodr_path``, replacing any previously parsed document."""
        self.opendrive_data = opendrive.parseFile(self.xodr_path, self.options)
        logger.info("loaded %s: %d roads, %d junctions", self.xodr_path,
                    len(self.opendrive_data.roads), len(self.opendrive_data.junctions))
        return self.opendrive_data

    def getRoad(self, road_id):
        for road in self.opendrive_data.roads:
            if road.id == road_id:
                return road
        return None

    def getJunction(self, junction_id):
        for junction in self.opendrive_data.junctions:
            if junction.id == junction_id:
                return junction
        return None
