"""GTFS feed container"""

import logging
from typing import Dict, Iterator, Optional, Tuple, Union

from gtfs_io.db.collections import (
    EntityListCollection,
    StopTimeListCollection,
    TransferListCollection,
    UniqueEntityListCollection,
)
from gtfs_io.schemas import (
    Agency,
    Attribution,
    Calendar,
    CalendarDate,
    FareAttribute,
    FareRule,
    FeedInfo,
    Frequency,
    GTFSEntity,
    Level,
    Pathway,
    Route,
    Shape,
    Stop,
    StopTime,
    Transfer,
    Trip,
)

logger = logging.getLogger(__name__)

AnyCollection = Union[EntityListCollection, UniqueEntityListCollection]

# file name -> feed attribute, in the order entities are copied and merged
COLLECTION_ATTRIBUTES: Dict[str, str] = {
    "agency": "agencies",
    "stops": "stops",
    "routes": "routes",
    "trips": "trips",
    "stop_times": "stop_times",
    "calendar": "calendars",
    "calendar_dates": "calendar_dates",
    "fare_attributes": "fare_attributes",
    "fare_rules": "fare_rules",
    "frequencies": "frequencies",
    "shapes": "shapes",
    "transfers": "transfers",
    "levels": "levels",
    "pathways": "pathways",
    "attributions": "attributions",
}

# Replaced by natural key on merge; every other type is added unless an equal entity exists
MERGE_BY_KEY = frozenset(
    ["agency", "stops", "routes", "trips", "levels", "pathways", "fare_rules", "attributions"]
)


class GTFSFeed:
    """One collection per GTFS file plus the optional feed info record"""

    def __init__(self):
        self.agencies: UniqueEntityListCollection[Agency] = UniqueEntityListCollection()
        self.stops: UniqueEntityListCollection[Stop] = UniqueEntityListCollection()
        self.routes: UniqueEntityListCollection[Route] = UniqueEntityListCollection()
        self.trips: UniqueEntityListCollection[Trip] = UniqueEntityListCollection()
        self.stop_times = StopTimeListCollection()
        self.calendars: EntityListCollection[Calendar] = EntityListCollection()
        self.calendar_dates: EntityListCollection[CalendarDate] = EntityListCollection()
        self.fare_attributes: EntityListCollection[FareAttribute] = EntityListCollection()
        self.fare_rules: UniqueEntityListCollection[FareRule] = UniqueEntityListCollection()
        self.frequencies: EntityListCollection[Frequency] = EntityListCollection()
        self.shapes: EntityListCollection[Shape] = EntityListCollection()
        self.transfers = TransferListCollection()
        self.levels: UniqueEntityListCollection[Level] = UniqueEntityListCollection()
        self.pathways: UniqueEntityListCollection[Pathway] = UniqueEntityListCollection()
        self.attributions: UniqueEntityListCollection[Attribution] = UniqueEntityListCollection()
        self.feed_info: Optional[FeedInfo] = None

    def get_feed_info(self) -> Optional[FeedInfo]:
        return self.feed_info

    def set_feed_info(self, feed_info: Optional[FeedInfo]) -> None:
        self.feed_info = feed_info

    def collection_for(self, file_name: str) -> Optional[AnyCollection]:
        """Collection holding the entities of a file, None for unknown names and feed_info"""
        attribute = COLLECTION_ATTRIBUTES.get(file_name)
        if attribute is None:
            return None
        return getattr(self, attribute)

    def collections(self) -> Iterator[Tuple[str, AnyCollection]]:
        for file_name, attribute in COLLECTION_ATTRIBUTES.items():
            yield file_name, getattr(self, attribute)

    def add(self, entity: GTFSEntity) -> None:
        """Add an entity to the collection matching its type"""
        if isinstance(entity, FeedInfo):
            self.set_feed_info(entity)
            return
        collection = self.collection_for(entity.file_name)
        if collection is None:
            raise ValueError(f"No collection for {type(entity).__name__}")
        collection.add(entity)

    @property
    def is_empty(self) -> bool:
        return self.feed_info is None and all(len(c) == 0 for _, c in self.collections())

    def copy_to(self, target: "GTFSFeed") -> None:
        """Append every entity of this feed to target, duplicates included"""
        for file_name, collection in self.collections():
            target.collection_for(file_name).add_range(collection)
        if self.feed_info is not None:
            target.set_feed_info(self.feed_info)

    def merge(self, other: "GTFSFeed") -> None:
        """Merge other into this feed

        Key-identified types (agencies, stops, routes, trips, levels,
        pathways, fare rules, attributions) replace any entity with the
        same natural key. Other types are added only when no equal entity
        is present yet. Feed info is replaced when other has one.
        """
        for file_name, incoming in other.collections():
            collection = self.collection_for(file_name)
            if file_name in MERGE_BY_KEY:
                for entity in incoming:
                    collection.remove_all_with_key(entity.key)
                    collection.add(entity)
            else:
                existing = set(collection)
                for entity in incoming:
                    if entity not in existing:
                        collection.add(entity)
                        existing.add(entity)
        if other.feed_info is not None:
            self.set_feed_info(other.feed_info)
        logger.debug(f"Merged feed: {self.summary()}")

    def summary(self) -> Dict[str, int]:
        """Entity count per file name"""
        counts = {file_name: len(collection) for file_name, collection in self.collections()}
        counts["feed_info"] = 0 if self.feed_info is None else 1
        return counts

    def __repr__(self) -> str:
        return f"<GTFSFeed {self.summary()}>"
