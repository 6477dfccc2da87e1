"""Calendar (calendar.txt) and calendar date (calendar_dates.txt) entities"""

import datetime as dt
from typing import Any, Optional, Tuple
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.enums import ExceptionType

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class Calendar(GTFSEntity):
    """Weekly service pattern between two dates"""

    file_name = "calendar"
    key_field = "service_id"
    natural_order = True

    service_id: Optional[str] = Field(None, description="GTFS service_id")
    monday: bool = Field(default=False, description="Service runs on Mondays")
    tuesday: bool = Field(default=False, description="Service runs on Tuesdays")
    wednesday: bool = Field(default=False, description="Service runs on Wednesdays")
    thursday: bool = Field(default=False, description="Service runs on Thursdays")
    friday: bool = Field(default=False, description="Service runs on Fridays")
    saturday: bool = Field(default=False, description="Service runs on Saturdays")
    sunday: bool = Field(default=False, description="Service runs on Sundays")
    start_date: Optional[dt.date] = Field(None, description="First day of service")
    end_date: Optional[dt.date] = Field(None, description="Last day of service")

    @property
    def mask(self) -> int:
        """Week pattern as a bitmask, bit 0 is Monday and bit 6 Sunday"""
        mask = 0
        for bit, day in enumerate(WEEKDAYS):
            if getattr(self, day):
                mask |= 1 << bit
        return mask

    @mask.setter
    def mask(self, value: int) -> None:
        for bit, day in enumerate(WEEKDAYS):
            setattr(self, day, bool(value & (1 << bit)))

    def runs_on(self, weekday: int) -> bool:
        """Week pattern value for a weekday (0 = Monday, as date.weekday())"""
        return getattr(self, WEEKDAYS[weekday])

    def set_day(self, weekday: int, value: bool) -> None:
        setattr(self, WEEKDAYS[weekday], value)

    def copy_week_pattern_from(self, other: "Calendar") -> None:
        self.service_id = other.service_id
        self.mask = other.mask

    def sort_key(self) -> Tuple[Any, ...]:
        return (self.service_id or "", self.start_date or dt.date.min, self.end_date or dt.date.min)


class CalendarDate(GTFSEntity):
    """Service added or removed on one date"""

    file_name = "calendar_dates"
    key_field = "service_id"
    natural_order = True

    service_id: Optional[str] = Field(None, description="GTFS service_id")
    date: Optional[dt.date] = Field(None, description="Exception date")
    exception_type: Optional[ExceptionType] = Field(None, description="1=service added, 2=service removed")

    def sort_key(self) -> Tuple[Any, ...]:
        return (
            self.service_id or "",
            self.date or dt.date.min,
            int(self.exception_type) if self.exception_type is not None else 0,
        )
