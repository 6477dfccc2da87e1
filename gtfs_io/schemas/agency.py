"""Agency (agency.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity


class Agency(GTFSEntity):
    """Transit agency with service represented in the feed"""

    file_name = "agency"
    key_field = "agency_id"

    agency_id: Optional[str] = Field(None, description="GTFS agency_id, optional for single-agency feeds")
    agency_name: Optional[str] = Field(None, description="Full name of the agency")
    agency_url: Optional[str] = Field(None, description="Agency website")
    agency_timezone: Optional[str] = Field(None, description="Timezone of the agency (tz database name)")
    agency_lang: Optional[str] = Field(None, description="Primary language (IETF BCP 47)")
    agency_phone: Optional[str] = Field(None, description="Voice telephone number")
    agency_fare_url: Optional[str] = Field(None, description="Page where tickets can be bought online")
    agency_email: Optional[str] = Field(None, description="Customer service email")
