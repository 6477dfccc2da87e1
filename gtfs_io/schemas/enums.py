"""GTFS enumerations

Member values are the integer codes used in the text files.
"""

from enum import IntEnum


class RouteType(IntEnum):
    """routes.txt route_type"""
    TRAM = 0
    SUBWAY = 1
    RAIL = 2
    BUS = 3
    FERRY = 4
    CABLE_CAR = 5
    GONDOLA = 6
    FUNICULAR = 7
    TROLLEYBUS = 11
    MONORAIL = 12


class ExceptionType(IntEnum):
    """calendar_dates.txt exception_type"""
    ADDED = 1
    REMOVED = 2


class PaymentMethodType(IntEnum):
    """fare_attributes.txt payment_method"""
    ON_BOARD = 0
    BEFORE_BOARDING = 1


class TransferType(IntEnum):
    """transfers.txt transfer_type"""
    RECOMMENDED = 0
    TIMED = 1
    MINIMUM_TIME = 2
    NOT_POSSIBLE = 3


class WheelchairAccessibilityType(IntEnum):
    """trips.txt wheelchair_accessible"""
    NO_INFORMATION = 0
    SOME_ACCESSIBILITY = 1
    NO_ACCESSIBILITY = 2


class PickupType(IntEnum):
    """stop_times.txt pickup_type"""
    REGULAR = 0
    NO_PICKUP = 1
    PHONE_FOR_PICKUP = 2
    DRIVER_FOR_PICKUP = 3


class DropOffType(IntEnum):
    """stop_times.txt drop_off_type"""
    REGULAR = 0
    NO_DROP_OFF = 1
    PHONE_FOR_DROP_OFF = 2
    DRIVER_FOR_DROP_OFF = 3


class ContinuousPickup(IntEnum):
    """routes.txt / stop_times.txt continuous_pickup"""
    CONTINUOUS = 0
    NO_CONTINUOUS = 1
    PHONE_AGENCY = 2
    COORDINATE_WITH_DRIVER = 3


class ContinuousDropOff(IntEnum):
    """routes.txt / stop_times.txt continuous_drop_off"""
    CONTINUOUS = 0
    NO_CONTINUOUS = 1
    PHONE_AGENCY = 2
    COORDINATE_WITH_DRIVER = 3


class LocationType(IntEnum):
    """stops.txt location_type"""
    STOP = 0
    STATION = 1
    ENTRANCE_EXIT = 2
    GENERIC_NODE = 3
    BOARDING_AREA = 4


class DirectionType(IntEnum):
    """trips.txt direction_id"""
    ONE_DIRECTION = 0
    OPPOSITE_DIRECTION = 1


class PathwayMode(IntEnum):
    """pathways.txt pathway_mode"""
    WALKWAY = 1
    STAIRS = 2
    MOVING_SIDEWALK = 3
    ESCALATOR = 4
    ELEVATOR = 5
    FARE_GATE = 6
    EXIT_GATE = 7


class IsBidirectional(IntEnum):
    """pathways.txt is_bidirectional"""
    UNIDIRECTIONAL = 0
    BIDIRECTIONAL = 1


class TimePointType(IntEnum):
    """stop_times.txt timepoint; NONE means the column was left empty"""
    NONE = -1
    APPROXIMATE = 0
    EXACT = 1
