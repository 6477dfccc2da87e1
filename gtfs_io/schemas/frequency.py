"""Frequency (frequencies.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity


class Frequency(GTFSEntity):
    """Headway-based service of a trip"""

    file_name = "frequencies"
    key_field = "trip_id"

    trip_id: Optional[str] = Field(None, description="GTFS trip_id")
    start_time: Optional[str] = Field(None, description="Start of the headway period")
    end_time: Optional[str] = Field(None, description="End of the headway period")
    headway_secs: Optional[str] = Field(None, description="Seconds between departures")
    exact_times: Optional[bool] = Field(None, description="Exact schedule instead of headway")
