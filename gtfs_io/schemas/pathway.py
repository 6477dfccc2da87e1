"""Pathway (pathways.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.enums import IsBidirectional, PathwayMode


class Pathway(GTFSEntity):
    """Link between two locations inside a station"""

    file_name = "pathways"
    key_field = "pathway_id"

    pathway_id: Optional[str] = Field(None, description="GTFS pathway_id")
    from_stop_id: Optional[str] = Field(None, description="Location where the pathway begins")
    to_stop_id: Optional[str] = Field(None, description="Location where the pathway ends")
    pathway_mode: Optional[PathwayMode] = Field(None, description="Type of pathway")
    is_bidirectional: Optional[IsBidirectional] = Field(None, description="0=one way, 1=both ways")
    length: Optional[float] = Field(None, description="Horizontal length in meters")
    traversal_time: Optional[int] = Field(None, description="Average traversal time in seconds")
    stair_count: Optional[int] = Field(None, description="Number of stairs")
    max_slope: Optional[float] = Field(None, description="Maximum slope ratio")
    min_width: Optional[float] = Field(None, description="Minimum width in meters")
    signposted_as: Optional[str] = Field(None, description="Signage text")
    reversed_signposted_as: Optional[str] = Field(None, description="Signage text in the reverse direction")
