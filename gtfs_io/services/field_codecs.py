"""
GTFS field codecs

Parse and format functions for every column type found in GTFS files,
and the (file, field) -> codec table used by the reader and the writer.

Parse functions share the signature ``parse(config, name, field_name, value)``
where ``name`` is the file being read; they raise GTFSParseError or fall
back to a default depending on the ParserConfig. Format functions take the
typed value and return the cell text.
"""

import datetime as dt
from enum import IntEnum
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple, Type

from gtfs_io.core.config import FailurePolicy, ParserConfig
from gtfs_io.core.exceptions import GTFSParseError
from gtfs_io.schemas.enums import (
    ContinuousDropOff,
    ContinuousPickup,
    DirectionType,
    DropOffType,
    ExceptionType,
    IsBidirectional,
    LocationType,
    PathwayMode,
    PaymentMethodType,
    PickupType,
    RouteType,
    TimePointType,
    TransferType,
    WheelchairAccessibilityType,
)
from gtfs_io.schemas.time_of_day import TimeOfDay

ParseFunc = Callable[[ParserConfig, str, str, Optional[str]], Any]
FormatFunc = Callable[[Any], str]


class FieldCodec(NamedTuple):
    """Paired parse/format functions for one column"""
    parse: ParseFunc
    format: FormatFunc


def _is_empty(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def clean_value(config: ParserConfig, value: Optional[str]) -> Optional[str]:
    """Trim and remove matching surrounding double quotes (lenient mode only)"""
    if value is None or not config.strip_quotes:
        return value
    value = value.strip()
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return value


# Strings

_NEEDS_QUOTES = (",", '"', "\r", "\n")


def parse_string(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Optional[str]:
    return clean_value(config, value)


def format_string(value: Optional[str]) -> str:
    """Quote only when the value contains a comma, a double quote or a line break"""
    if value is None or value == "":
        return ""
    if any(c in value for c in _NEEDS_QUOTES):
        return quote(value)
    return value


def format_quoted_string(value: Optional[str]) -> str:
    """Always quote non-empty values"""
    if value is None or value == "":
        return ""
    return quote(value)


def quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


# Numbers

def parse_double(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Optional[float]:
    """Empty is no value; unparsable raises or is dropped per double_failure"""
    if _is_empty(value):
        return None
    value = clean_value(config, value)
    try:
        return float(value)
    except ValueError as e:
        if config.double_failure == FailurePolicy.RAISE:
            raise GTFSParseError(name, field_name, value, e)
        return None


def parse_int(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Optional[int]:
    """Empty is no value; unparsable always raises"""
    if _is_empty(value):
        return None
    value = clean_value(config, value)
    try:
        return int(value.strip())
    except ValueError as e:
        raise GTFSParseError(name, field_name, value, e)


def parse_uint(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Optional[int]:
    result = parse_int(config, name, field_name, value)
    if result is not None and result < 0:
        raise GTFSParseError(name, field_name, value)
    return result


def parse_coordinate(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> float:
    """Stop latitude/longitude: required, 0.0 when missing in lenient mode"""
    try:
        result = parse_double(config, name, field_name, value)
    except GTFSParseError:
        if config.coordinate_failure == FailurePolicy.RAISE:
            raise
        result = None
    if result is None:
        if config.coordinate_failure == FailurePolicy.RAISE:
            raise GTFSParseError(name, field_name, value)
        return 0.0
    return result


def format_number(value: Optional[float]) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return repr(value)
    return str(value)


# Booleans

def parse_bool(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Optional[bool]:
    """Only "0" and "1" are accepted, in every mode"""
    if _is_empty(value):
        return None
    value = clean_value(config, value)
    if value == "0":
        return False
    if value == "1":
        return True
    raise GTFSParseError(name, field_name, value)


def parse_weekday(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> bool:
    return bool(parse_bool(config, name, field_name, value))


def format_bool(value: Optional[bool]) -> str:
    if value is None:
        return ""
    return "1" if value else "0"


# Colors

def parse_color(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Optional[int]:
    """RRGGBB, #RRGGBB, #AARRGGBB or 0xAARRGGBB to a signed 32-bit ARGB value"""
    if _is_empty(value):
        return None
    value = clean_value(config, value).strip()
    if len(value) == 6:
        argb = "FF" + value
    elif len(value) == 7 and value.startswith("#"):
        argb = "FF" + value[1:]
    elif len(value) == 9 and value.startswith("#"):
        argb = value[1:]
    elif len(value) == 10 and value.lower().startswith("0x"):
        argb = value[2:]
    else:
        raise GTFSParseError(name, field_name, value)
    try:
        unsigned = int(argb, 16)
    except ValueError as e:
        raise GTFSParseError(name, field_name, value, e)
    if unsigned >= 0x80000000:
        return unsigned - 0x100000000
    return unsigned


def format_color(value: Optional[int]) -> str:
    """RRGGBB from the low 24 bits, alpha is dropped"""
    if value is None:
        return ""
    return f"{value & 0xFFFFFF:06X}"


# Dates

def date_parser(date_format: str) -> Callable[[str], dt.date]:
    def parse(value: str) -> dt.date:
        return dt.datetime.strptime(value, date_format).date()
    return parse


def date_formatter(date_format: str) -> Callable[[dt.date], str]:
    def format_date(value: dt.date) -> str:
        return value.strftime(date_format)
    return format_date


def date_codec(
    parser: Optional[Callable[[str], dt.date]] = None,
    formatter: Optional[Callable[[dt.date], str]] = None,
) -> FieldCodec:
    """Date codec; without a parser the config's date_format is used"""

    def parse(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Optional[dt.date]:
        if _is_empty(value):
            return None
        value = clean_value(config, value).strip()
        try:
            return (parser or date_parser(config.date_format))(value)
        except (ValueError, TypeError) as e:
            raise GTFSParseError(name, field_name, value, e)

    def format_date(value: Optional[dt.date]) -> str:
        if value is None:
            return ""
        return (formatter or date_formatter("%Y%m%d"))(value)

    return FieldCodec(parse, format_date)


# Times

def parse_time(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Optional[TimeOfDay]:
    """Empty is no value; malformed raises or becomes 00:00:00 per time_failure"""
    if _is_empty(value):
        return None
    value = clean_value(config, value)
    result = TimeOfDay.parse(value)
    if result is None:
        if config.time_failure == FailurePolicy.RAISE:
            raise GTFSParseError(name, field_name, value)
        return TimeOfDay()
    return result


def format_time(value: Optional[TimeOfDay]) -> str:
    if value is None:
        return ""
    return str(value)


# Enumerations

_RAISE = object()


def enum_codec(
    enum_type: Type[IntEnum],
    empty: Any = _RAISE,
    failure_policy: Optional[str] = None,
    empty_output: Tuple[IntEnum, ...] = (),
) -> FieldCodec:
    """Codec for an enumeration stored as its integer code

    ``empty`` is returned for empty cells (raise when not given).
    ``failure_policy`` names a ParserConfig attribute; when that policy is
    not RAISE, unknown codes give no value instead of an error.
    ``empty_output`` lists members that are written as an empty cell.
    """

    def parse(config: ParserConfig, name: str, field_name: str, value: Optional[str]) -> Any:
        if _is_empty(value):
            if empty is _RAISE:
                raise GTFSParseError(name, field_name, value)
            return empty
        value = clean_value(config, value).strip()
        try:
            return enum_type(int(value))
        except ValueError as e:
            if failure_policy is not None and getattr(config, failure_policy) != FailurePolicy.RAISE:
                return None
            raise GTFSParseError(name, field_name, value, e)

    def format_enum(value: Optional[IntEnum]) -> str:
        if value is None or value in empty_output:
            return ""
        return str(int(value))

    return FieldCodec(parse, format_enum)


STRING = FieldCodec(parse_string, format_string)
QUOTED_STRING = FieldCodec(parse_string, format_quoted_string)
DOUBLE = FieldCodec(parse_double, format_number)
INT = FieldCodec(parse_int, format_number)
UINT = FieldCodec(parse_uint, format_number)
BOOL = FieldCodec(parse_bool, format_bool)
WEEKDAY = FieldCodec(parse_weekday, format_bool)
COORDINATE = FieldCodec(parse_coordinate, format_number)
COLOR = FieldCodec(parse_color, format_color)
DATE = date_codec()
TIME = FieldCodec(parse_time, format_time)

ROUTE_TYPE = enum_codec(RouteType)
EXCEPTION_TYPE = enum_codec(ExceptionType)
PAYMENT_METHOD = enum_codec(PaymentMethodType)
TRANSFER_TYPE = enum_codec(TransferType, empty=TransferType.RECOMMENDED)
WHEELCHAIR_ACCESSIBLE = enum_codec(WheelchairAccessibilityType, empty=None)
PICKUP_TYPE = enum_codec(PickupType, empty=None)
DROP_OFF_TYPE = enum_codec(DropOffType, empty=None)
CONTINUOUS_PICKUP = enum_codec(ContinuousPickup, empty=None)
CONTINUOUS_DROP_OFF = enum_codec(ContinuousDropOff, empty=None)
LOCATION_TYPE = enum_codec(LocationType, empty=None, failure_policy="location_type_failure")
DIRECTION_TYPE = enum_codec(DirectionType, empty=None)
PATHWAY_MODE = enum_codec(PathwayMode, empty=None)
IS_BIDIRECTIONAL = enum_codec(IsBidirectional, empty=None)
TIMEPOINT = enum_codec(TimePointType, empty=TimePointType.NONE, empty_output=(TimePointType.NONE,))


FILE_CODECS: Dict[str, Dict[str, FieldCodec]] = {
    "agency": {
        "agency_id": STRING,
        "agency_name": QUOTED_STRING,
        "agency_url": STRING,
        "agency_timezone": STRING,
        "agency_lang": STRING,
        "agency_phone": STRING,
        "agency_fare_url": STRING,
        "agency_email": STRING,
    },
    "attributions": {
        "attribution_id": STRING,
        "agency_id": STRING,
        "route_id": STRING,
        "trip_id": STRING,
        "organization_name": STRING,
        "is_producer": BOOL,
        "is_operator": BOOL,
        "is_authority": BOOL,
        "attribution_url": STRING,
        "attribution_email": STRING,
        "attribution_phone": STRING,
    },
    "calendar": {
        "service_id": STRING,
        "monday": WEEKDAY,
        "tuesday": WEEKDAY,
        "wednesday": WEEKDAY,
        "thursday": WEEKDAY,
        "friday": WEEKDAY,
        "saturday": WEEKDAY,
        "sunday": WEEKDAY,
        "start_date": DATE,
        "end_date": DATE,
    },
    "calendar_dates": {
        "service_id": STRING,
        "date": DATE,
        "exception_type": EXCEPTION_TYPE,
    },
    "fare_attributes": {
        "fare_id": STRING,
        "price": STRING,
        "currency_type": STRING,
        "payment_method": PAYMENT_METHOD,
        "transfers": UINT,
        "agency_id": STRING,
        "transfer_duration": STRING,
    },
    "fare_rules": {
        "fare_id": STRING,
        "route_id": STRING,
        "origin_id": STRING,
        "destination_id": STRING,
        "contains_id": STRING,
    },
    "feed_info": {
        "feed_publisher_name": QUOTED_STRING,
        "feed_publisher_url": QUOTED_STRING,
        "feed_lang": STRING,
        "feed_start_date": STRING,
        "feed_end_date": STRING,
        "feed_version": STRING,
    },
    "frequencies": {
        "trip_id": STRING,
        "start_time": STRING,
        "end_time": STRING,
        "headway_secs": STRING,
        "exact_times": BOOL,
    },
    "levels": {
        "level_id": STRING,
        "level_index": DOUBLE,
        "level_name": QUOTED_STRING,
    },
    "pathways": {
        "pathway_id": STRING,
        "from_stop_id": STRING,
        "to_stop_id": STRING,
        "pathway_mode": PATHWAY_MODE,
        "is_bidirectional": IS_BIDIRECTIONAL,
        "length": DOUBLE,
        "traversal_time": INT,
        "stair_count": INT,
        "max_slope": DOUBLE,
        "min_width": DOUBLE,
        "signposted_as": STRING,
        "reversed_signposted_as": STRING,
    },
    "routes": {
        "route_id": STRING,
        "agency_id": STRING,
        "route_short_name": QUOTED_STRING,
        "route_long_name": QUOTED_STRING,
        "route_desc": STRING,
        "route_type": ROUTE_TYPE,
        "route_url": STRING,
        "route_color": COLOR,
        "route_text_color": COLOR,
        "continuous_pickup": CONTINUOUS_PICKUP,
        "continuous_drop_off": CONTINUOUS_DROP_OFF,
    },
    "shapes": {
        "shape_id": STRING,
        "shape_pt_lat": DOUBLE,
        "shape_pt_lon": DOUBLE,
        "shape_pt_sequence": UINT,
        "shape_dist_traveled": DOUBLE,
    },
    "stops": {
        "stop_id": STRING,
        "stop_code": STRING,
        "stop_name": QUOTED_STRING,
        "stop_desc": QUOTED_STRING,
        "stop_lat": COORDINATE,
        "stop_lon": COORDINATE,
        "zone_id": STRING,
        "stop_url": STRING,
        "location_type": LOCATION_TYPE,
        "parent_station": STRING,
        "stop_timezone": STRING,
        "wheelchair_boarding": STRING,
        "level_id": STRING,
        "platform_code": STRING,
    },
    "stop_times": {
        "trip_id": STRING,
        "arrival_time": TIME,
        "departure_time": TIME,
        "stop_id": STRING,
        "stop_sequence": UINT,
        "stop_headsign": QUOTED_STRING,
        "pickup_type": PICKUP_TYPE,
        "drop_off_type": DROP_OFF_TYPE,
        "shape_dist_traveled": DOUBLE,
        "timepoint": TIMEPOINT,
        "continuous_pickup": CONTINUOUS_PICKUP,
        "continuous_drop_off": CONTINUOUS_DROP_OFF,
    },
    "transfers": {
        "from_stop_id": STRING,
        "to_stop_id": STRING,
        "transfer_type": TRANSFER_TYPE,
        "min_transfer_time": STRING,
    },
    "trips": {
        "trip_id": STRING,
        "route_id": STRING,
        "service_id": STRING,
        "trip_headsign": STRING,
        "trip_short_name": QUOTED_STRING,
        "direction_id": DIRECTION_TYPE,
        "block_id": STRING,
        "shape_id": STRING,
        "wheelchair_accessible": WHEELCHAIR_ACCESSIBLE,
    },
}

# Strategy map: (file name, field name) -> codec
FIELD_CODECS: Dict[Tuple[str, str], FieldCodec] = {
    (file_name, field_name): codec
    for file_name, fields in FILE_CODECS.items()
    for field_name, codec in fields.items()
}

DATE_FIELDS = tuple(key for key, codec in FIELD_CODECS.items() if codec is DATE)


def build_codec_map(
    overrides: Optional[Dict[Tuple[str, str], FieldCodec]] = None,
    date_parse_fn: Optional[Callable[[str], dt.date]] = None,
    date_format_fn: Optional[Callable[[dt.date], str]] = None,
) -> Dict[Tuple[str, str], FieldCodec]:
    """Copy of FIELD_CODECS with custom date functions and per-field overrides applied"""
    codecs = dict(FIELD_CODECS)
    if date_parse_fn is not None or date_format_fn is not None:
        custom_date = date_codec(date_parse_fn, date_format_fn)
        for key in DATE_FIELDS:
            codecs[key] = custom_date
    if overrides:
        codecs.update(overrides)
    return codecs
