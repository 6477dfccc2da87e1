"""Stop (stops.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.enums import LocationType


class Stop(GTFSEntity):
    """Stop, station, entrance or generic node"""

    file_name = "stops"
    key_field = "stop_id"

    stop_id: Optional[str] = Field(None, description="GTFS stop_id")
    stop_code: Optional[str] = Field(None, description="Short text or number identifying the stop for riders")
    stop_name: Optional[str] = Field(None, description="Name of the location")
    stop_desc: Optional[str] = Field(None, description="Description of the location")
    stop_lat: Optional[float] = Field(None, description="Latitude (WGS84)")
    stop_lon: Optional[float] = Field(None, description="Longitude (WGS84)")
    zone_id: Optional[str] = Field(None, description="Fare zone")
    stop_url: Optional[str] = Field(None, description="Page about the location")
    location_type: Optional[LocationType] = Field(None, description="0=stop, 1=station, 2=entrance, 3=node, 4=boarding area")
    parent_station: Optional[str] = Field(None, description="stop_id of the parent station")
    stop_timezone: Optional[str] = Field(None, description="Timezone of the location")
    wheelchair_boarding: Optional[str] = Field(None, description="0=no info, 1=accessible, 2=not accessible")
    level_id: Optional[str] = Field(None, description="GTFS level_id")
    platform_code: Optional[str] = Field(None, description="Platform identifier")
