"""Stop time (stop_times.txt) entity"""

from typing import Any, Optional, Tuple
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.enums import (
    ContinuousDropOff,
    ContinuousPickup,
    DropOffType,
    PickupType,
    TimePointType,
)
from gtfs_io.schemas.time_of_day import TimeOfDay


class StopTime(GTFSEntity):
    """Arrival/departure of a trip at a stop

    Ordered by (trip_id, stop_sequence) so the stops of one trip stay
    in sequence whatever the row order of the source file.
    """

    file_name = "stop_times"
    key_field = "trip_id"
    natural_order = True

    trip_id: Optional[str] = Field(None, description="GTFS trip_id")
    arrival_time: Optional[TimeOfDay] = Field(None, description="Arrival time (HH:MM:SS, may exceed 24h)")
    departure_time: Optional[TimeOfDay] = Field(None, description="Departure time (HH:MM:SS, may exceed 24h)")
    stop_id: Optional[str] = Field(None, description="GTFS stop_id")
    stop_sequence: Optional[int] = Field(None, ge=0, description="Order of stops for this trip")
    stop_headsign: Optional[str] = Field(None, description="Headsign override for this stop")
    pickup_type: Optional[PickupType] = Field(None, description="0=regular, 1=none, 2=phone, 3=driver")
    drop_off_type: Optional[DropOffType] = Field(None, description="0=regular, 1=none, 2=phone, 3=driver")
    continuous_pickup: Optional[ContinuousPickup] = Field(None, description="Continuous pickup behaviour")
    continuous_drop_off: Optional[ContinuousDropOff] = Field(None, description="Continuous drop off behaviour")
    shape_dist_traveled: Optional[float] = Field(None, description="Distance traveled along shape")
    timepoint: TimePointType = Field(TimePointType.NONE, description="0=approximate, 1=exact")

    def sort_key(self) -> Tuple[Any, ...]:
        return (self.trip_id or "", self.stop_sequence if self.stop_sequence is not None else -1)
