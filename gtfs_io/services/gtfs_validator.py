"""
GTFS Validation Service

Checks the integrity of an in-memory feed: unique identifiers,
references between files and stop sequence order.
"""

import logging
from typing import Any, Dict, List, Optional, Set, Tuple

from gtfs_io.feed import GTFSFeed

logger = logging.getLogger(__name__)


class ValidationIssue:
    """Represents a single validation issue"""

    def __init__(
        self,
        severity: str,  # 'error', 'warning', 'info'
        category: str,  # 'routes', 'stops', 'stop_times', etc.
        message: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.severity = severity
        self.category = category
        self.message = message
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'severity': self.severity,
            'category': self.category,
            'message': self.message,
            'entity_type': self.entity_type,
            'entity_id': self.entity_id,
            'field': self.field,
            'details': self.details
        }

    def __repr__(self) -> str:
        return f"<ValidationIssue {self.severity} {self.category}: {self.message}>"


class ValidationResult:
    """Container for validation results"""

    def __init__(self):
        self.issues: List[ValidationIssue] = []
        self.error_count = 0
        self.warning_count = 0
        self.info_count = 0

    def add_issue(self, issue: ValidationIssue):
        self.issues.append(issue)

        if issue.severity == 'error':
            self.error_count += 1
        elif issue.severity == 'warning':
            self.warning_count += 1
        elif issue.severity == 'info':
            self.info_count += 1

    def add_error(self, category: str, message: str, **kwargs):
        self.add_issue(ValidationIssue('error', category, message, **kwargs))

    def add_warning(self, category: str, message: str, **kwargs):
        self.add_issue(ValidationIssue('warning', category, message, **kwargs))

    def add_info(self, category: str, message: str, **kwargs):
        self.add_issue(ValidationIssue('info', category, message, **kwargs))

    def is_valid(self) -> bool:
        """Check if validation passed (no errors)"""
        return self.error_count == 0

    @property
    def errors(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == 'error']

    def first_error_message(self) -> str:
        errors = self.errors
        return errors[0].message if errors else ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.is_valid(),
            'error_count': self.error_count,
            'warning_count': self.warning_count,
            'info_count': self.info_count,
            'issues': [issue.to_dict() for issue in self.issues],
            'summary': self._generate_summary()
        }

    def _generate_summary(self) -> str:
        """Generate human-readable summary"""
        if self.is_valid():
            if self.warning_count == 0:
                return "Validation passed with no issues"
            return f"Validation passed with {self.warning_count} warning(s)"
        return f"Validation failed with {self.error_count} error(s) and {self.warning_count} warning(s)"


class GTFSFeedValidator:
    """
    Feed integrity rules

    - agencies, stops, routes, trips: duplicate ids
    - routes: unknown agency (when an agency_id is given)
    - trips: unknown route
    - stop_times: duplicate (trip_id, stop_sequence), unknown stop or trip,
      stop sequences not increasing within a trip

    Warnings: no feed_info record, trips on a service that no calendar or
    calendar date defines. Info: services defined but used by no trip.
    """

    def validate(self, feed: GTFSFeed) -> ValidationResult:
        result = ValidationResult()

        agency_ids = self._validate_unique_ids(feed.agencies, 'agency', 'agency_id', result)
        stop_ids = self._validate_unique_ids(feed.stops, 'stop', 'stop_id', result)
        route_ids = self._validate_unique_ids(feed.routes, 'route', 'route_id', result)
        trip_ids = self._validate_unique_ids(feed.trips, 'trip', 'trip_id', result)

        self._validate_routes(feed, agency_ids, result)
        self._validate_trips(feed, route_ids, result)
        self._validate_stop_times(feed, stop_ids, trip_ids, result)
        self._validate_services(feed, result)
        self._validate_feed_info(feed, result)

        logger.info(
            f"Feed validation complete: "
            f"{result.error_count} errors, {result.warning_count} warnings, {result.info_count} info"
        )
        return result

    def _validate_unique_ids(self, collection, entity_type: str, field: str, result: ValidationResult) -> Set[str]:
        seen: Set[str] = set()
        for entity in collection:
            entity_id = getattr(entity, field)
            if entity_id in seen:
                result.add_error(
                    f"{entity_type}s" if entity_type != 'agency' else 'agencies',
                    f"Duplicate {entity_type} id found: {entity_id}",
                    entity_type=entity_type,
                    entity_id=entity_id,
                    field=field,
                )
            seen.add(entity_id)
        return seen

    def _validate_routes(self, feed: GTFSFeed, agency_ids: Set[str], result: ValidationResult):
        for route in feed.routes:
            if route.agency_id and route.agency_id not in agency_ids:
                result.add_error(
                    'routes',
                    f"Unknown agency found in route {route.route_id}: {route.agency_id}",
                    entity_type='route',
                    entity_id=route.route_id,
                    field='agency_id',
                )

    def _validate_trips(self, feed: GTFSFeed, route_ids: Set[str], result: ValidationResult):
        for trip in feed.trips:
            if trip.route_id not in route_ids:
                result.add_error(
                    'trips',
                    f"Unknown route found in trip {trip.trip_id}: {trip.route_id}",
                    entity_type='trip',
                    entity_id=trip.trip_id,
                    field='route_id',
                )

    def _validate_services(self, feed: GTFSFeed, result: ValidationResult):
        service_ids = {calendar.service_id for calendar in feed.calendars}
        service_ids.update(calendar_date.service_id for calendar_date in feed.calendar_dates)

        used: Set[str] = set()
        for trip in feed.trips:
            if not trip.service_id:
                continue
            used.add(trip.service_id)
            if trip.service_id not in service_ids:
                result.add_warning(
                    'trips',
                    f"Unknown service found in trip {trip.trip_id}: {trip.service_id}",
                    entity_type='trip',
                    entity_id=trip.trip_id,
                    field='service_id',
                )

        for service_id in sorted(s for s in service_ids if s and s not in used):
            result.add_info(
                'calendar',
                f"Service {service_id} is not used by any trip",
                entity_type='service',
                entity_id=service_id,
                field='service_id',
            )

    def _validate_feed_info(self, feed: GTFSFeed, result: ValidationResult):
        if feed.feed_info is None:
            result.add_warning(
                'feed_info',
                "No feed_info record found",
                entity_type='feed_info',
            )

    def _validate_stop_times(
        self,
        feed: GTFSFeed,
        stop_ids: Set[str],
        trip_ids: Set[str],
        result: ValidationResult,
    ):
        seen: Set[Tuple[Optional[str], Optional[int]]] = set()
        sequences: Dict[Optional[str], List[Optional[int]]] = {}

        for stop_time in feed.stop_times:
            stop_time_id = (stop_time.trip_id, stop_time.stop_sequence)
            if stop_time_id in seen:
                result.add_error(
                    'stop_times',
                    f"Duplicate stop_time entry found: {stop_time.trip_id} {stop_time.stop_sequence}",
                    entity_type='stop_time',
                    entity_id=stop_time.trip_id,
                    field='stop_sequence',
                )
            seen.add(stop_time_id)
            sequences.setdefault(stop_time.trip_id, []).append(stop_time.stop_sequence)

            if stop_time.stop_id not in stop_ids:
                result.add_error(
                    'stop_times',
                    f"Unknown stop found in stop_time {stop_time.trip_id}: {stop_time.stop_id}",
                    entity_type='stop_time',
                    entity_id=stop_time.trip_id,
                    field='stop_id',
                )
            if stop_time.trip_id not in trip_ids:
                result.add_error(
                    'stop_times',
                    f"Unknown trip found in stop_time {stop_time.stop_id}: {stop_time.trip_id}",
                    entity_type='stop_time',
                    entity_id=stop_time.trip_id,
                    field='trip_id',
                )

        for trip_id, trip_sequences in sequences.items():
            previous = None
            for current in trip_sequences:
                if previous is not None and current is not None and previous >= current:
                    result.add_error(
                        'stop_times',
                        f"Stop sequences values shall increase and be unique in stop_times file for trip id {trip_id}.",
                        entity_type='trip',
                        entity_id=trip_id,
                        field='stop_sequence',
                        details={'previous': previous, 'current': current},
                    )
                    break
                previous = current


def validate_feed(feed: GTFSFeed) -> Tuple[bool, str]:
    """Validate a feed, return (is_valid, first error message or '')"""
    result = GTFSFeedValidator().validate(feed)
    return result.is_valid(), result.first_error_message()
