"""Shape (shapes.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity


class Shape(GTFSEntity):
    """One point of a shape"""

    file_name = "shapes"
    key_field = "shape_id"

    shape_id: Optional[str] = Field(None, description="GTFS shape_id")
    shape_pt_lat: Optional[float] = Field(None, description="Latitude")
    shape_pt_lon: Optional[float] = Field(None, description="Longitude")
    shape_pt_sequence: Optional[int] = Field(None, ge=0, description="Order of this point in the shape")
    shape_dist_traveled: Optional[float] = Field(None, description="Distance traveled from first point")
