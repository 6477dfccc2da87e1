"""Fare rule (fare_rules.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity


class FareRule(GTFSEntity):
    """Applies a fare to routes or zones"""

    file_name = "fare_rules"
    key_field = "fare_id"

    fare_id: Optional[str] = Field(None, description="GTFS fare_id")
    route_id: Optional[str] = Field(None, description="GTFS route_id")
    origin_id: Optional[str] = Field(None, description="Origin zone_id")
    destination_id: Optional[str] = Field(None, description="Destination zone_id")
    contains_id: Optional[str] = Field(None, description="Zone_id passed through")
