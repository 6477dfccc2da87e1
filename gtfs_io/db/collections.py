"""In-memory entity collections backing a GTFSFeed"""

from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.stop_time import StopTime
from gtfs_io.schemas.transfer import Transfer

E = TypeVar("E", bound=GTFSEntity)


class EntityListCollection(Generic[E]):
    """List of entities where many rows can share a key (e.g. stop times of one trip)

    Insertion order is kept. Entities are grouped by their natural key
    field; the group index is rebuilt lazily after removals.
    """

    def __init__(self, entities: Optional[Iterable[E]] = None):
        self._entities: List[E] = []
        self._index: Optional[Dict[Optional[str], List[E]]] = None
        if entities is not None:
            self.add_range(entities)

    def add(self, entity: E) -> None:
        self._entities.append(entity)
        if self._index is not None:
            self._index.setdefault(entity.key, []).append(entity)

    def add_range(self, entities: Iterable[E]) -> None:
        for entity in entities:
            self.add(entity)

    def get(self, key: Optional[str] = None) -> List[E]:
        """All entities, or the entities with the given key"""
        if key is None:
            return list(self._entities)
        return list(self._groups().get(key, []))

    def remove(self, key: str) -> bool:
        """Remove every entity with the given key"""
        return self.remove_all_with_key(key)

    def remove_all_with_key(self, key: str) -> bool:
        return self._remove_where(lambda entity: entity.key == key)

    def remove_all(self) -> None:
        self._entities = []
        self._index = None

    @property
    def count(self) -> int:
        return len(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._entities))

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def _groups(self) -> Dict[Optional[str], List[E]]:
        if self._index is None:
            self._index = {}
            for entity in self._entities:
                self._index.setdefault(entity.key, []).append(entity)
        return self._index

    def _remove_where(self, predicate: Callable[[E], bool]) -> bool:
        kept = [entity for entity in self._entities if not predicate(entity)]
        removed = len(kept) != len(self._entities)
        if removed:
            self._entities = kept
            self._index = None
        return removed


class UniqueEntityListCollection(EntityListCollection[E]):
    """List of entities identified by their natural key (stops, routes, trips...)

    Duplicate keys are stored as-is so feed validation can report them;
    lookups by key return the first entity added with that key.
    """

    def get(self, key: Optional[str] = None):
        """All entities, or the single entity with the given key (None when missing)"""
        if key is None:
            return list(self._entities)
        entities = self._groups().get(key)
        if not entities:
            return None
        return entities[0]

    def get_at(self, index: int) -> E:
        return self._entities[index]

    def update(self, key: str, entity: E) -> bool:
        """Replace the entity with the given key, False when there is none"""
        for position, existing in enumerate(self._entities):
            if existing.key == key:
                self._entities[position] = entity
                self._index = None
                return True
        return False

    def remove(self, key: str) -> bool:
        """Remove the entity with the given key"""
        for position, existing in enumerate(self._entities):
            if existing.key == key:
                del self._entities[position]
                self._index = None
                return True
        return False


class StopTimeListCollection(EntityListCollection[StopTime]):
    """Stop times, keyed by trip with an extra lookup by stop"""

    def get_for_trip(self, trip_id: str) -> List[StopTime]:
        return self.get(trip_id)

    def get_for_stop(self, stop_id: str) -> List[StopTime]:
        return [stop_time for stop_time in self._entities if stop_time.stop_id == stop_id]

    def remove_for_trip(self, trip_id: str) -> bool:
        return self.remove(trip_id)

    def remove_for_stop(self, stop_id: str) -> bool:
        return self._remove_where(lambda stop_time: stop_time.stop_id == stop_id)


class TransferListCollection(EntityListCollection[Transfer]):
    """Transfers, keyed by origin stop with an extra lookup by destination stop"""

    def get_for_from_stop(self, stop_id: str) -> List[Transfer]:
        return self.get(stop_id)

    def get_for_to_stop(self, stop_id: str) -> List[Transfer]:
        return [transfer for transfer in self._entities if transfer.to_stop_id == stop_id]

    def remove_for_from_stop(self, stop_id: str) -> bool:
        return self.remove(stop_id)

    def remove_for_to_stop(self, stop_id: str) -> bool:
        return self._remove_where(lambda transfer: transfer.to_stop_id == stop_id)
