"""Level (levels.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity


class Level(GTFSEntity):
    """Level of a station"""

    file_name = "levels"
    key_field = "level_id"

    level_id: Optional[str] = Field(None, description="GTFS level_id")
    level_index: Optional[float] = Field(None, description="Relative position, 0 is ground level")
    level_name: Optional[str] = Field(None, description="Name seen by riders")
