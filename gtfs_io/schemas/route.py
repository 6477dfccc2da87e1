"""Route (routes.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.enums import ContinuousDropOff, ContinuousPickup, RouteType


class Route(GTFSEntity):
    """Transit route

    Colors are stored as signed 32-bit ARGB integers; an RGB value read
    from the file gets a fully opaque alpha byte.
    """

    file_name = "routes"
    key_field = "route_id"

    route_id: Optional[str] = Field(None, description="GTFS route_id")
    agency_id: Optional[str] = Field(None, description="GTFS agency_id")
    route_short_name: Optional[str] = Field(None, description="Short name, e.g. '32'")
    route_long_name: Optional[str] = Field(None, description="Full name")
    route_desc: Optional[str] = Field(None, description="Description")
    route_type: Optional[RouteType] = Field(None, description="Type of transportation")
    route_url: Optional[str] = Field(None, description="Page about the route")
    route_color: Optional[int] = Field(None, description="Route color (ARGB)")
    route_text_color: Optional[int] = Field(None, description="Text color drawn on route_color (ARGB)")
    continuous_pickup: Optional[ContinuousPickup] = Field(None, description="Continuous pickup behaviour")
    continuous_drop_off: Optional[ContinuousDropOff] = Field(None, description="Continuous drop off behaviour")
