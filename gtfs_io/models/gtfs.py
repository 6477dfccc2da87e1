"""GTFS tables for the SQL feed database

One table per GTFS file. Every row carries the id of the feed it belongs
to; rows are read back in insertion order (by id). Enum columns hold the
integer code and stop time columns hold seconds since the start of the
service day.
"""

import datetime as dt
from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gtfs_io.db.base_class import Base, TimestampMixin


class GTFSFeedRecord(Base, TimestampMixin):
    """One stored feed, including its feed_info.txt record when present"""

    __tablename__ = "gtfs_feeds"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    has_feed_info: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    feed_publisher_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    feed_publisher_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    feed_lang: Mapped[str | None] = mapped_column(String(35), nullable=True)
    feed_start_date: Mapped[str | None] = mapped_column(String(8), nullable=True)
    feed_end_date: Mapped[str | None] = mapped_column(String(8), nullable=True)
    feed_version: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<GTFSFeedRecord {self.id}>"


class FeedRowMixin:
    """Surrogate id plus the owning feed"""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    feed_id: Mapped[int] = mapped_column(
        ForeignKey("gtfs_feeds.id", ondelete="CASCADE"), nullable=False, index=True
    )


class AgencyRow(Base, FeedRowMixin):
    """agency.txt"""

    __tablename__ = "gtfs_agencies"

    agency_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    agency_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    agency_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    agency_timezone: Mapped[str | None] = mapped_column(String(100), nullable=True)
    agency_lang: Mapped[str | None] = mapped_column(String(35), nullable=True)
    agency_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    agency_fare_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    agency_email: Mapped[str | None] = mapped_column(String(255), nullable=True)


class StopRow(Base, FeedRowMixin):
    """stops.txt"""

    __tablename__ = "gtfs_stops"

    stop_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    stop_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    stop_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stop_desc: Mapped[str | None] = mapped_column(Text, nullable=True)
    stop_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    stop_lon: Mapped[float | None] = mapped_column(Float, nullable=True)
    zone_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stop_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    location_type: Mapped[int | None] = mapped_column(
        Integer, nullable=True, comment="0=stop, 1=station, 2=entrance, 3=node, 4=boarding area"
    )
    parent_station: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stop_timezone: Mapped[str | None] = mapped_column(String(100), nullable=True)
    wheelchair_boarding: Mapped[str | None] = mapped_column(String(10), nullable=True)
    level_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    platform_code: Mapped[str | None] = mapped_column(String(50), nullable=True)


class RouteRow(Base, FeedRowMixin):
    """routes.txt"""

    __tablename__ = "gtfs_routes"

    route_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    agency_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    route_short_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    route_long_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    route_desc: Mapped[str | None] = mapped_column(Text, nullable=True)
    route_type: Mapped[int | None] = mapped_column(Integer, nullable=True)
    route_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    route_color: Mapped[int | None] = mapped_column(Integer, nullable=True, comment="Signed 32-bit ARGB")
    route_text_color: Mapped[int | None] = mapped_column(Integer, nullable=True, comment="Signed 32-bit ARGB")
    continuous_pickup: Mapped[int | None] = mapped_column(Integer, nullable=True)
    continuous_drop_off: Mapped[int | None] = mapped_column(Integer, nullable=True)


class TripRow(Base, FeedRowMixin):
    """trips.txt"""

    __tablename__ = "gtfs_trips"

    trip_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    route_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    service_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    trip_headsign: Mapped[str | None] = mapped_column(String(255), nullable=True)
    trip_short_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    direction_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    block_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    shape_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    wheelchair_accessible: Mapped[int | None] = mapped_column(Integer, nullable=True)


class StopTimeRow(Base, FeedRowMixin):
    """stop_times.txt"""

    __tablename__ = "gtfs_stop_times"

    trip_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    arrival_time: Mapped[int | None] = mapped_column(Integer, nullable=True, comment="Seconds since service day start")
    departure_time: Mapped[int | None] = mapped_column(Integer, nullable=True, comment="Seconds since service day start")
    stop_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    stop_sequence: Mapped[int | None] = mapped_column(Integer, nullable=True)
    stop_headsign: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pickup_type: Mapped[int | None] = mapped_column(Integer, nullable=True)
    drop_off_type: Mapped[int | None] = mapped_column(Integer, nullable=True)
    continuous_pickup: Mapped[int | None] = mapped_column(Integer, nullable=True)
    continuous_drop_off: Mapped[int | None] = mapped_column(Integer, nullable=True)
    shape_dist_traveled: Mapped[float | None] = mapped_column(Float, nullable=True)
    timepoint: Mapped[int] = mapped_column(Integer, nullable=False, default=-1, comment="-1=unset, 0=approximate, 1=exact")


class CalendarRow(Base, FeedRowMixin):
    """calendar.txt"""

    __tablename__ = "gtfs_calendars"

    service_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    monday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tuesday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    wednesday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    thursday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    friday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    saturday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sunday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    start_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)


class CalendarDateRow(Base, FeedRowMixin):
    """calendar_dates.txt"""

    __tablename__ = "gtfs_calendar_dates"

    service_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    exception_type: Mapped[int | None] = mapped_column(Integer, nullable=True, comment="1=added, 2=removed")


class FareAttributeRow(Base, FeedRowMixin):
    """fare_attributes.txt"""

    __tablename__ = "gtfs_fare_attributes"

    fare_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    price: Mapped[str | None] = mapped_column(String(50), nullable=True)
    currency_type: Mapped[str | None] = mapped_column(String(3), nullable=True)
    payment_method: Mapped[int | None] = mapped_column(Integer, nullable=True)
    transfers: Mapped[int | None] = mapped_column(Integer, nullable=True)
    agency_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    transfer_duration: Mapped[str | None] = mapped_column(String(50), nullable=True)


class FareRuleRow(Base, FeedRowMixin):
    """fare_rules.txt"""

    __tablename__ = "gtfs_fare_rules"

    fare_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    route_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    origin_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    destination_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contains_id: Mapped[str | None] = mapped_column(String(255), nullable=True)


class FrequencyRow(Base, FeedRowMixin):
    """frequencies.txt"""

    __tablename__ = "gtfs_frequencies"

    trip_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    start_time: Mapped[str | None] = mapped_column(String(8), nullable=True)
    end_time: Mapped[str | None] = mapped_column(String(8), nullable=True)
    headway_secs: Mapped[str | None] = mapped_column(String(20), nullable=True)
    exact_times: Mapped[bool | None] = mapped_column(Boolean, nullable=True)


class ShapeRow(Base, FeedRowMixin):
    """shapes.txt"""

    __tablename__ = "gtfs_shapes"

    shape_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    shape_pt_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    shape_pt_lon: Mapped[float | None] = mapped_column(Float, nullable=True)
    shape_pt_sequence: Mapped[int | None] = mapped_column(Integer, nullable=True)
    shape_dist_traveled: Mapped[float | None] = mapped_column(Float, nullable=True)


class TransferRow(Base, FeedRowMixin):
    """transfers.txt"""

    __tablename__ = "gtfs_transfers"

    from_stop_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    to_stop_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    transfer_type: Mapped[int | None] = mapped_column(Integer, nullable=True)
    min_transfer_time: Mapped[str | None] = mapped_column(String(20), nullable=True)


class LevelRow(Base, FeedRowMixin):
    """levels.txt"""

    __tablename__ = "gtfs_levels"

    level_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    level_index: Mapped[float | None] = mapped_column(Float, nullable=True)
    level_name: Mapped[str | None] = mapped_column(String(255), nullable=True)


class PathwayRow(Base, FeedRowMixin):
    """pathways.txt"""

    __tablename__ = "gtfs_pathways"

    pathway_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    from_stop_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    to_stop_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pathway_mode: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_bidirectional: Mapped[int | None] = mapped_column(Integer, nullable=True)
    length: Mapped[float | None] = mapped_column(Float, nullable=True)
    traversal_time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    stair_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    max_slope: Mapped[float | None] = mapped_column(Float, nullable=True)
    min_width: Mapped[float | None] = mapped_column(Float, nullable=True)
    signposted_as: Mapped[str | None] = mapped_column(String(255), nullable=True)
    reversed_signposted_as: Mapped[str | None] = mapped_column(String(255), nullable=True)


class AttributionRow(Base, FeedRowMixin):
    """attributions.txt"""

    __tablename__ = "gtfs_attributions"

    attribution_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    agency_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    route_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    trip_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    organization_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_producer: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    is_operator: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    is_authority: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    attribution_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    attribution_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    attribution_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)


# file name -> table, in the order rows are inserted
ROW_MODELS = {
    "agency": AgencyRow,
    "stops": StopRow,
    "routes": RouteRow,
    "trips": TripRow,
    "stop_times": StopTimeRow,
    "calendar": CalendarRow,
    "calendar_dates": CalendarDateRow,
    "fare_attributes": FareAttributeRow,
    "fare_rules": FareRuleRow,
    "frequencies": FrequencyRow,
    "shapes": ShapeRow,
    "transfers": TransferRow,
    "levels": LevelRow,
    "pathways": PathwayRow,
    "attributions": AttributionRow,
}
