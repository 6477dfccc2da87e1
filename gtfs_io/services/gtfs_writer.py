"""
GTFS Writer

Writes a GTFSFeed to targets: one file per non-empty collection, a fixed
header, rows in a deterministic order and every value encoded with the
same field codecs the reader uses.
"""

import datetime as dt
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from gtfs_io.feed import GTFSFeed
from gtfs_io.files.targets import GTFSDirectoryTarget, GTFSFeedTarget, GTFSTarget, GTFSZipTarget
from gtfs_io.schemas import GTFSEntity
from gtfs_io.services.field_codecs import FieldCodec, build_codec_map

logger = logging.getLogger(__name__)

FILE_HEADERS: Dict[str, List[str]] = {
    "agency": [
        "agency_id", "agency_name", "agency_url", "agency_timezone",
        "agency_lang", "agency_phone", "agency_fare_url", "agency_email",
    ],
    "calendar_dates": ["service_id", "date", "exception_type"],
    "calendar": [
        "service_id", "monday", "tuesday", "wednesday", "thursday",
        "friday", "saturday", "sunday", "start_date", "end_date",
    ],
    "fare_attributes": [
        "fare_id", "price", "currency_type", "payment_method",
        "transfers", "agency_id", "transfer_duration",
    ],
    "fare_rules": ["fare_id", "route_id", "origin_id", "destination_id", "contains_id"],
    "feed_info": [
        "feed_publisher_name", "feed_publisher_url", "feed_lang",
        "feed_start_date", "feed_end_date", "feed_version",
    ],
    "frequencies": ["trip_id", "start_time", "end_time", "headway_secs", "exact_times"],
    "routes": [
        "route_id", "agency_id", "route_short_name", "route_long_name", "route_desc",
        "route_type", "route_url", "route_color", "route_text_color",
        "continuous_pickup", "continuous_drop_off",
    ],
    "shapes": ["shape_id", "shape_pt_lat", "shape_pt_lon", "shape_pt_sequence", "shape_dist_traveled"],
    "stops": [
        "stop_id", "stop_code", "stop_name", "stop_desc", "stop_lat", "stop_lon",
        "zone_id", "stop_url", "location_type", "parent_station", "stop_timezone",
        "wheelchair_boarding", "level_id", "platform_code",
    ],
    "stop_times": [
        "trip_id", "arrival_time", "departure_time", "stop_id", "stop_sequence",
        "stop_headsign", "pickup_type", "drop_off_type", "shape_dist_traveled",
        "timepoint", "continuous_pickup", "continuous_drop_off",
    ],
    "transfers": ["from_stop_id", "to_stop_id", "transfer_type", "min_transfer_time"],
    "trips": [
        "trip_id", "route_id", "service_id", "trip_headsign", "trip_short_name",
        "direction_id", "block_id", "shape_id", "wheelchair_accessible",
    ],
    "levels": ["level_id", "level_index", "level_name"],
    "pathways": [
        "pathway_id", "from_stop_id", "to_stop_id", "pathway_mode", "is_bidirectional",
        "length", "traversal_time", "stair_count", "max_slope", "min_width",
        "signposted_as", "reversed_signposted_as",
    ],
    "attributions": [
        "attribution_id", "agency_id", "route_id", "trip_id", "organization_name",
        "is_producer", "is_operator", "is_authority", "attribution_url",
        "attribution_email", "attribution_phone",
    ],
}


def _text(value: Optional[str]) -> str:
    return value or ""


def _number(value: Optional[float]) -> float:
    return value if value is not None else -1


def _date(value: Optional[dt.date]) -> dt.date:
    return value or dt.date.min


SortKey = Callable[[Any], Tuple[Any, ...]]

# file -> sort key, files without an entry keep collection order
SORT_KEYS: Dict[str, SortKey] = {
    "agency": lambda e: (_text(e.agency_id),),
    "calendar_dates": lambda e: (
        _date(e.date),
        _number(e.exception_type),
        _text(e.service_id),
    ),
    "calendar": lambda e: (_text(e.service_id),),
    "fare_attributes": lambda e: (_text(e.fare_id),),
    "fare_rules": lambda e: (_text(e.route_id),),
    "frequencies": lambda e: (_text(e.trip_id),),
    "routes": lambda e: (_text(e.route_id),),
    "shapes": lambda e: (_text(e.shape_id), _number(e.shape_pt_sequence)),
    "stops": lambda e: (_text(e.stop_id),),
    "stop_times": lambda e: (_text(e.trip_id), _number(e.stop_sequence)),
    "trips": lambda e: (_text(e.trip_id),),
    "levels": lambda e: (_text(e.level_id),),
    "pathways": lambda e: (_text(e.pathway_id),),
    "attributions": lambda e: (_text(e.attribution_id),),
}


class GTFSWriter:
    """Writes feeds to targets"""

    def __init__(
        self,
        date_formatter: Optional[Callable[[dt.date], str]] = None,
        codecs: Optional[Dict[Tuple[str, str], FieldCodec]] = None,
    ):
        self.headers: Dict[str, List[str]] = {k: list(v) for k, v in FILE_HEADERS.items()}
        self.sort_keys: Dict[str, SortKey] = dict(SORT_KEYS)
        self.codecs = build_codec_map(codecs, date_format_fn=date_formatter)

    def write(self, feed: GTFSFeed, targets: Union[GTFSFeedTarget, Iterable[GTFSTarget]]) -> None:
        """Write every non-empty collection to the target with the same name"""
        by_name = {target.name: target for target in targets}
        for file_name in self.headers:
            target = by_name.get(file_name)
            if target is None:
                continue
            if file_name == "feed_info":
                entities = [feed.feed_info] if feed.feed_info is not None else []
            else:
                collection = feed.collection_for(file_name)
                entities = list(collection) if collection is not None else []
            self.write_file(target, file_name, entities)

    def write_file(self, target: GTFSTarget, file_name: str, entities: Sequence[GTFSEntity]) -> int:
        """Write one file, return the number of rows written"""
        if not entities:
            return 0

        sort_key = self.sort_keys.get(file_name)
        if sort_key is not None:
            entities = sorted(entities, key=sort_key)

        header = self.headers[file_name]
        try:
            if target.exists:
                target.clear()
            target.write(header)
            for entity in entities:
                target.write(self.format_row(file_name, header, entity))
        finally:
            target.close()
        logger.info(f"Wrote {len(entities)} rows to {file_name}")
        return len(entities)

    def format_row(self, file_name: str, header: List[str], entity: GTFSEntity) -> List[str]:
        row = []
        for field_name in header:
            codec = self.codecs.get((file_name, field_name))
            value = getattr(entity, field_name, None)
            if codec is None:
                row.append("" if value is None else str(value))
            else:
                row.append(codec.format(value))
        return row


def write_feed(feed: GTFSFeed, path: str, **kwargs) -> None:
    """Write a feed into a directory, or into a zip archive when path ends with .zip"""
    writer = GTFSWriter(**kwargs)
    if path.lower().endswith(".zip"):
        target = GTFSZipTarget(path)
    else:
        target = GTFSDirectoryTarget(path)
    with target:
        writer.write(feed, target)
    logger.info(f"Wrote feed to {path}: {feed.summary()}")
