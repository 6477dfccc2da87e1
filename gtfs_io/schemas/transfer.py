"""Transfer (transfers.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.enums import TransferType


class Transfer(GTFSEntity):
    """Rule for a connection between two stops"""

    file_name = "transfers"
    key_field = "from_stop_id"

    from_stop_id: Optional[str] = Field(None, description="Stop where the connection begins")
    to_stop_id: Optional[str] = Field(None, description="Stop where the connection ends")
    transfer_type: Optional[TransferType] = Field(None, description="0=recommended, 1=timed, 2=min time, 3=not possible")
    min_transfer_time: Optional[str] = Field(None, description="Minimum transfer time in seconds")
