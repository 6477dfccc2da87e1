"""Attribution (attributions.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity


class Attribution(GTFSEntity):
    """Organisation involved in producing the feed"""

    file_name = "attributions"
    key_field = "attribution_id"

    attribution_id: Optional[str] = Field(None, description="GTFS attribution_id")
    agency_id: Optional[str] = Field(None, description="Agency the attribution applies to")
    route_id: Optional[str] = Field(None, description="Route the attribution applies to")
    trip_id: Optional[str] = Field(None, description="Trip the attribution applies to")
    organization_name: Optional[str] = Field(None, description="Name of the organisation")
    is_producer: Optional[bool] = Field(None, description="Organisation produced the data")
    is_operator: Optional[bool] = Field(None, description="Organisation operates the service")
    is_authority: Optional[bool] = Field(None, description="Organisation has authority over the service")
    attribution_url: Optional[str] = Field(None, description="Organisation website")
    attribution_email: Optional[str] = Field(None, description="Organisation email")
    attribution_phone: Optional[str] = Field(None, description="Organisation phone number")
