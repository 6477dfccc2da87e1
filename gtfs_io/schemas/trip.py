"""Trip (trips.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.enums import DirectionType, WheelchairAccessibilityType


class Trip(GTFSEntity):
    """Trip of a route on a service"""

    file_name = "trips"
    key_field = "trip_id"

    trip_id: Optional[str] = Field(None, description="GTFS trip_id")
    route_id: Optional[str] = Field(None, description="GTFS route_id")
    service_id: Optional[str] = Field(None, description="GTFS service_id")
    trip_headsign: Optional[str] = Field(None, description="Text that appears on signage")
    trip_short_name: Optional[str] = Field(None, description="Short name for trip")
    direction_id: Optional[DirectionType] = Field(None, description="0=outbound, 1=inbound")
    block_id: Optional[str] = Field(None, description="Block ID for vehicle operations")
    shape_id: Optional[str] = Field(None, description="GTFS shape_id")
    wheelchair_accessible: Optional[WheelchairAccessibilityType] = Field(
        None, description="0=no info, 1=accessible, 2=not accessible"
    )
