"""
Feed filters

A filter builds a new feed holding a selection of routes or stops and
everything they need to stay a valid feed: trips, stop times, stops,
agencies, service calendars, fares, frequencies, shapes, transfers,
pathways and levels between kept stops.
"""

import logging
from typing import Callable, Iterable, Set, Union

from gtfs_io.feed import GTFSFeed
from gtfs_io.schemas import Route, Stop

logger = logging.getLogger(__name__)


class GTFSFeedFilter:
    """Base class, filter() returns a new feed and leaves the input untouched"""

    def filter(self, feed: GTFSFeed) -> GTFSFeed:
        raise NotImplementedError

    def _add_related(
        self,
        feed: GTFSFeed,
        filtered: GTFSFeed,
        route_ids: Set[str],
        trip_ids: Set[str],
        stop_ids: Set[str],
    ) -> None:
        """Copy everything hanging off the kept routes, trips and stops"""
        service_ids = set()
        shape_ids = set()
        for trip in filtered.trips:
            service_ids.add(trip.service_id)
            if trip.shape_id and trip.shape_id.strip():
                shape_ids.add(trip.shape_id)

        agency_ids = {route.agency_id for route in filtered.routes}
        for agency in feed.agencies:
            if agency.agency_id in agency_ids:
                filtered.agencies.add(agency)

        for calendar in feed.calendars:
            if calendar.service_id in service_ids:
                filtered.calendars.add(calendar)
        for calendar_date in feed.calendar_dates:
            if calendar_date.service_id in service_ids:
                filtered.calendar_dates.add(calendar_date)

        fare_ids = set()
        for fare_rule in feed.fare_rules:
            if fare_rule.route_id in route_ids:
                filtered.fare_rules.add(fare_rule)
                fare_ids.add(fare_rule.fare_id)
        for fare_attribute in feed.fare_attributes:
            if fare_attribute.fare_id in fare_ids:
                filtered.fare_attributes.add(fare_attribute)

        for frequency in feed.frequencies:
            if frequency.trip_id in trip_ids:
                filtered.frequencies.add(frequency)

        for shape in feed.shapes:
            if shape.shape_id in shape_ids:
                filtered.shapes.add(shape)

        for transfer in feed.transfers:
            if transfer.from_stop_id in stop_ids and transfer.to_stop_id in stop_ids:
                filtered.transfers.add(transfer)
        for pathway in feed.pathways:
            if pathway.from_stop_id in stop_ids and pathway.to_stop_id in stop_ids:
                filtered.pathways.add(pathway)

        level_ids = {stop.level_id for stop in filtered.stops if stop.level_id}
        for level in feed.levels:
            if level.level_id in level_ids:
                filtered.levels.add(level)

        # feed-wide attributions have no agency, route or trip
        for attribution in feed.attributions:
            if not (attribution.agency_id or attribution.route_id or attribution.trip_id):
                filtered.attributions.add(attribution)
            elif (
                (attribution.agency_id and attribution.agency_id in agency_ids)
                or (attribution.route_id and attribution.route_id in route_ids)
                or (attribution.trip_id and attribution.trip_id in trip_ids)
            ):
                filtered.attributions.add(attribution)

        if feed.feed_info is not None:
            filtered.set_feed_info(feed.feed_info)
        logger.debug(f"Filtered feed: {filtered.summary()}")


class GTFSFeedRoutesFilter(GTFSFeedFilter):
    """Keeps the routes matching a predicate or a set of route ids"""

    def __init__(self, routes: Union[Callable[[Route], bool], Iterable[str]]):
        if callable(routes):
            self.predicate = routes
        else:
            route_ids = set(routes)
            self.predicate = lambda route: route.route_id in route_ids

    def filter(self, feed: GTFSFeed) -> GTFSFeed:
        filtered = GTFSFeed()

        route_ids = set()
        for route in feed.routes:
            if self.predicate(route):
                filtered.routes.add(route)
                route_ids.add(route.route_id)

        trip_ids = set()
        for trip in feed.trips:
            if trip.route_id in route_ids:
                filtered.trips.add(trip)
                trip_ids.add(trip.trip_id)

        stop_ids = set()
        for stop_time in feed.stop_times:
            if stop_time.trip_id in trip_ids:
                filtered.stop_times.add(stop_time)
                stop_ids.add(stop_time.stop_id)

        for stop in feed.stops:
            if stop.stop_id in stop_ids:
                filtered.stops.add(stop)

        self._add_related(feed, filtered, route_ids, trip_ids, stop_ids)
        return filtered


class GTFSFeedStopsFilter(GTFSFeedFilter):
    """Keeps the trips serving a selection of stops, with all of their stops"""

    def __init__(self, stops: Union[Callable[[Stop], bool], Iterable[str]]):
        if callable(stops):
            self.predicate = stops
        else:
            selected_ids = set(stops)
            self.predicate = lambda stop: stop.stop_id in selected_ids

    def filter(self, feed: GTFSFeed) -> GTFSFeed:
        filtered = GTFSFeed()

        stop_ids = {stop.stop_id for stop in feed.stops if self.predicate(stop)}
        trip_ids = {stop_time.trip_id for stop_time in feed.stop_times if stop_time.stop_id in stop_ids}
        # every stop of a kept trip stays
        for stop_time in feed.stop_times:
            if stop_time.trip_id in trip_ids:
                stop_ids.add(stop_time.stop_id)

        for stop_time in feed.stop_times:
            if stop_time.trip_id in trip_ids:
                filtered.stop_times.add(stop_time)

        for stop in feed.stops:
            if stop.stop_id in stop_ids:
                filtered.stops.add(stop)

        route_ids = set()
        for trip in feed.trips:
            if trip.trip_id in trip_ids:
                filtered.trips.add(trip)
                route_ids.add(trip.route_id)

        for route in feed.routes:
            if route.route_id in route_ids:
                filtered.routes.add(route)

        self._add_related(feed, filtered, route_ids, trip_ids, stop_ids)
        return filtered
