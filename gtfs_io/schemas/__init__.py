"""GTFS entities"""

from gtfs_io.schemas.agency import Agency
from gtfs_io.schemas.attribution import Attribution
from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.calendar import Calendar, CalendarDate
from gtfs_io.schemas.fare_attribute import FareAttribute
from gtfs_io.schemas.fare_rule import FareRule
from gtfs_io.schemas.feed_info import FeedInfo
from gtfs_io.schemas.frequency import Frequency
from gtfs_io.schemas.level import Level
from gtfs_io.schemas.pathway import Pathway
from gtfs_io.schemas.route import Route
from gtfs_io.schemas.shape import Shape
from gtfs_io.schemas.stop import Stop
from gtfs_io.schemas.stop_time import StopTime
from gtfs_io.schemas.time_of_day import TimeOfDay
from gtfs_io.schemas.transfer import Transfer
from gtfs_io.schemas.trip import Trip

ENTITY_TYPES = (
    Agency,
    Stop,
    Route,
    Trip,
    StopTime,
    Calendar,
    CalendarDate,
    FareAttribute,
    FareRule,
    Frequency,
    Shape,
    Transfer,
    Level,
    Pathway,
    Attribution,
    FeedInfo,
)

ENTITY_BY_FILE = {entity_type.file_name: entity_type for entity_type in ENTITY_TYPES}

__all__ = [
    "Agency",
    "Attribution",
    "Calendar",
    "CalendarDate",
    "ENTITY_BY_FILE",
    "ENTITY_TYPES",
    "FareAttribute",
    "FareRule",
    "FeedInfo",
    "Frequency",
    "GTFSEntity",
    "Level",
    "Pathway",
    "Route",
    "Shape",
    "Stop",
    "StopTime",
    "TimeOfDay",
    "Transfer",
    "Trip",
]
