"""Time of day as used by stop_times.txt"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TimeOfDay(BaseModel):
    """Duration since the start of the service day

    Hours are not wrapped at 24: a trip leaving at 25:10:00 runs after
    midnight on the service day it belongs to. Equality and ordering use
    the total number of seconds.
    """

    model_config = ConfigDict(frozen=True)

    hours: int = Field(default=0, ge=0, description="Hours, may exceed 23")
    minutes: int = Field(default=0, ge=0, description="Minutes")
    seconds: int = Field(default=0, ge=0, description="Seconds")

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @classmethod
    def from_total_seconds(cls, total_seconds: int) -> "TimeOfDay":
        hours, rest = divmod(int(total_seconds), 3600)
        minutes, seconds = divmod(rest, 60)
        return cls(hours=hours, minutes=minutes, seconds=seconds)

    @classmethod
    def parse(cls, value: str) -> Optional["TimeOfDay"]:
        """Parse H:MM:SS or HH:MM:SS, None when the text is malformed"""
        value = value.strip()
        if len(value) not in (7, 8):
            return None
        parts = value.split(":")
        if len(parts) != 3 or len(parts[1]) != 2 or len(parts[2]) != 2:
            return None
        if not all(part.isdigit() for part in parts):
            return None
        return cls(hours=int(parts[0]), minutes=int(parts[1]), seconds=int(parts[2]))

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.total_seconds == other.total_seconds

    def __hash__(self) -> int:
        return hash(self.total_seconds)

    def __lt__(self, other: "TimeOfDay") -> bool:
        return self.total_seconds < other.total_seconds

    def __le__(self, other: "TimeOfDay") -> bool:
        return self.total_seconds <= other.total_seconds

    def __gt__(self, other: "TimeOfDay") -> bool:
        return self.total_seconds > other.total_seconds

    def __ge__(self, other: "TimeOfDay") -> bool:
        return self.total_seconds >= other.total_seconds
