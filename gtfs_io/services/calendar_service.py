"""
Calendar helpers

Answer whether a service runs on a given day and rewrite calendar
entries when a single day is added to or removed from them.
"""

import datetime as dt
import logging
from typing import List, Optional

from gtfs_io.feed import GTFSFeed
from gtfs_io.schemas import Calendar, CalendarDate
from gtfs_io.schemas.enums import ExceptionType

logger = logging.getLogger(__name__)


def _in_range(calendar: Calendar, day: dt.date) -> bool:
    if calendar.start_date is None or calendar.end_date is None:
        return False
    return calendar.start_date <= day <= calendar.end_date


def covers_date(calendar: Calendar, day: dt.date) -> bool:
    """True when day is within the calendar's range and its weekday is set"""
    return _in_range(calendar, day) and calendar.runs_on(day.weekday())


def get_status_for(calendar: Calendar, day: dt.date) -> Optional[bool]:
    """Weekday flag for day, None when day is outside the calendar's range"""
    if not _in_range(calendar, day):
        return None
    return calendar.runs_on(day.weekday())


def create_calendar(day: dt.date, service_id: Optional[str]) -> Calendar:
    """Calendar running on exactly one day"""
    calendar = Calendar(service_id=service_id, start_date=day, end_date=day)
    calendar.set_day(day.weekday(), True)
    return calendar


def first_day_of_week(day: dt.date) -> dt.date:
    return day - dt.timedelta(days=day.weekday())


def last_day_of_week(day: dt.date) -> dt.date:
    return day + dt.timedelta(days=6 - day.weekday())


def set_day(calendar: Calendar, day: dt.date, value: bool) -> None:
    """Set the flag of one date, only for calendars spanning at most a week"""
    if (calendar.end_date - calendar.start_date).days > 7:
        raise ValueError("Cannot set the flag of a specific day if the calendar spans multiple weeks.")
    if not _in_range(calendar, day):
        raise ValueError("Cannot set the flag of a specific day if the day is not within the calendar's range.")
    calendar.set_day(day.weekday(), value)


def _period(calendar: Calendar, start: dt.date, end: dt.date) -> Calendar:
    period = Calendar(start_date=start, end_date=end)
    period.copy_week_pattern_from(calendar)
    return period


def add_day(calendar: Calendar, day: dt.date) -> List[Calendar]:
    """Calendars equivalent to calendar plus service on day"""
    if covers_date(calendar, day):
        return [calendar]

    if (calendar.end_date - calendar.start_date).days <= 7 and _in_range(calendar, day):
        extended = _period(calendar, calendar.start_date, calendar.end_date)
        set_day(extended, day, True)
        return [extended]
    return [calendar, create_calendar(day, calendar.service_id)]


def subtract_day(calendar: Calendar, day: dt.date) -> List[Calendar]:
    """Calendars equivalent to calendar without service on day

    The week holding day is split off and has the weekday cleared, the
    periods before and after it keep the original pattern.
    """
    if not covers_date(calendar, day):
        return [calendar]

    week_start = first_day_of_week(day)
    week_end = last_day_of_week(day)
    weekday = day.weekday()

    if week_start <= calendar.start_date and week_end >= calendar.end_date:
        trimmed = _period(calendar, calendar.start_date, calendar.end_date)
        trimmed.set_day(weekday, False)
        return [trimmed]

    if week_start <= calendar.start_date:
        subtracted = _period(calendar, calendar.start_date, week_end)
        subtracted.set_day(weekday, False)
        rest = _period(calendar, week_end + dt.timedelta(days=1), calendar.end_date)
        return [subtracted, rest]

    if week_end >= calendar.end_date:
        rest = _period(calendar, calendar.start_date, week_start - dt.timedelta(days=1))
        subtracted = _period(calendar, week_start, calendar.end_date)
        subtracted.set_day(weekday, False)
        return [rest, subtracted]

    before = _period(calendar, calendar.start_date, week_start - dt.timedelta(days=1))
    subtracted = _period(calendar, week_start, week_end)
    subtracted.set_day(weekday, False)
    after = _period(calendar, week_end + dt.timedelta(days=1), calendar.end_date)
    return [before, subtracted, after]


def add_or_subtract(calendar: Calendar, calendar_date: CalendarDate) -> List[Calendar]:
    """Apply one calendar date exception to a calendar"""
    if calendar_date.exception_type == ExceptionType.ADDED:
        return add_day(calendar, calendar_date.date)
    return subtract_day(calendar, calendar_date.date)


def service_active_on(feed: GTFSFeed, service_id: str, day: dt.date) -> bool:
    """Whether service_id runs on day, calendar dates taking precedence over calendars"""
    for calendar_date in feed.calendar_dates.get(service_id):
        if calendar_date.date == day:
            return calendar_date.exception_type == ExceptionType.ADDED
    return any(covers_date(calendar, day) for calendar in feed.calendars.get(service_id))
