"""
Feed databases

Both databases hand out integer feed ids. GTFSFeedDB keeps feeds in
memory; SQLFeedDB stores them in any SQLAlchemy-supported database.
"""

import logging
from enum import IntEnum
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import delete, inspect, select
from sqlalchemy.engine import Engine

from gtfs_io.db.base_class import Base
from gtfs_io.db.session import create_db_engine, create_session_factory
from gtfs_io.feed import COLLECTION_ATTRIBUTES, GTFSFeed
from gtfs_io.models.gtfs import ROW_MODELS, GTFSFeedRecord
from gtfs_io.schemas import ENTITY_BY_FILE, FeedInfo, GTFSEntity, TimeOfDay

logger = logging.getLogger(__name__)

FEED_INFO_FIELDS = list(FeedInfo.model_fields)


class GTFSFeedDB:
    """Feeds held in memory, ids are positions in the feed list

    Removed feeds leave an empty slot so ids are never reused.
    """

    def __init__(self):
        self._feeds: List[Optional[GTFSFeed]] = []

    def add_feed(self, feed: Optional[GTFSFeed] = None) -> int:
        """Store a new feed (a copy of feed when given) and return its id"""
        new_feed = GTFSFeed()
        if feed is not None:
            feed.copy_to(new_feed)
        self._feeds.append(new_feed)
        feed_id = len(self._feeds) - 1
        logger.debug(f"Added feed {feed_id}")
        return feed_id

    def remove_feed(self, feed_id: int) -> bool:
        if 0 <= feed_id < len(self._feeds) and self._feeds[feed_id] is not None:
            self._feeds[feed_id] = None
            logger.debug(f"Removed feed {feed_id}")
            return True
        return False

    def get_feeds(self) -> List[int]:
        return [feed_id for feed_id, feed in enumerate(self._feeds) if feed is not None]

    def get_feed(self, feed_id: int) -> Optional[GTFSFeed]:
        """The stored feed itself, changes to it are kept"""
        if 0 <= feed_id < len(self._feeds):
            return self._feeds[feed_id]
        return None

    def table_exists(self, table_name: str) -> bool:
        return table_name in COLLECTION_ATTRIBUTES or table_name == "feed_info"


def entity_to_row(entity: GTFSEntity) -> Dict[str, Any]:
    """Column values for an entity: enums as their code, times as seconds"""
    row = {}
    for name in type(entity).model_fields:
        value = getattr(entity, name)
        if isinstance(value, TimeOfDay):
            value = value.total_seconds
        elif isinstance(value, IntEnum):
            value = int(value)
        row[name] = value
    return row


def row_to_entity(entity_type: Type[GTFSEntity], row: Any) -> GTFSEntity:
    data = {}
    for name, field in entity_type.model_fields.items():
        value = getattr(row, name)
        if value is not None and TimeOfDay in getattr(field.annotation, "__args__", ()):
            value = TimeOfDay.from_total_seconds(value)
        data[name] = value
    return entity_type.model_validate(data)


class SQLFeedDB:
    """Feeds stored in a relational database

    Tables are created on first use. get_feed() builds a new GTFSFeed
    from the stored rows, so changes to it are not written back.
    """

    BULK_INSERT_BATCH_SIZE = 2500

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else create_db_engine(url)
        self.session_factory = create_session_factory(self.engine)
        Base.metadata.create_all(self.engine)

    def add_feed(self, feed: Optional[GTFSFeed] = None) -> int:
        """Insert a feed and every entity it holds, return the new feed id"""
        feed = feed if feed is not None else GTFSFeed()
        with self.session_factory() as session:
            try:
                record = GTFSFeedRecord(has_feed_info=feed.feed_info is not None)
                if feed.feed_info is not None:
                    for name in FEED_INFO_FIELDS:
                        setattr(record, name, getattr(feed.feed_info, name))
                session.add(record)
                session.flush()
                feed_id = record.id

                for file_name, collection in feed.collections():
                    model = ROW_MODELS[file_name]
                    batch = []
                    for entity in collection:
                        row = entity_to_row(entity)
                        row["feed_id"] = feed_id
                        batch.append(row)
                        if len(batch) >= self.BULK_INSERT_BATCH_SIZE:
                            session.execute(model.__table__.insert(), batch)
                            batch = []
                    if batch:
                        session.execute(model.__table__.insert(), batch)
                session.commit()
            except Exception:
                session.rollback()
                raise
        logger.info(f"Added feed {feed_id}: {feed.summary()}")
        return feed_id

    def remove_feed(self, feed_id: int) -> bool:
        with self.session_factory() as session:
            try:
                record = session.get(GTFSFeedRecord, feed_id)
                if record is None:
                    return False
                for model in ROW_MODELS.values():
                    session.execute(delete(model).where(model.feed_id == feed_id))
                session.delete(record)
                session.commit()
            except Exception:
                session.rollback()
                raise
        logger.info(f"Removed feed {feed_id}")
        return True

    def get_feeds(self) -> List[int]:
        with self.session_factory() as session:
            return list(session.scalars(select(GTFSFeedRecord.id).order_by(GTFSFeedRecord.id)))

    def get_feed(self, feed_id: int) -> Optional[GTFSFeed]:
        with self.session_factory() as session:
            record = session.get(GTFSFeedRecord, feed_id)
            if record is None:
                return None

            feed = GTFSFeed()
            for file_name, model in ROW_MODELS.items():
                entity_type = ENTITY_BY_FILE[file_name]
                collection = feed.collection_for(file_name)
                rows = session.scalars(
                    select(model).where(model.feed_id == feed_id).order_by(model.id)
                )
                for row in rows:
                    collection.add(row_to_entity(entity_type, row))

            if record.has_feed_info:
                feed.set_feed_info(
                    FeedInfo(**{name: getattr(record, name) for name in FEED_INFO_FIELDS})
                )
        return feed

    def table_exists(self, table_name: str) -> bool:
        return inspect(self.engine).has_table(table_name)

    def column_exists(self, table_name: str, column_name: str) -> bool:
        if not self.table_exists(table_name):
            return False
        columns = inspect(self.engine).get_columns(table_name)
        return any(column["name"] == column_name for column in columns)
