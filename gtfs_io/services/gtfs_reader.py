"""
GTFS Reader

Reads GTFS source files into a GTFSFeed. Files are read one at a time in
an order that respects the dependency table (routes after agency, trips
after routes...). Every cell goes through the field codec registered for
its (file, field) pair.
"""

import datetime as dt
import logging
from contextlib import closing
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple, Type, Union

from gtfs_io.core.config import ParserConfig
from gtfs_io.core.exceptions import (
    GTFSDependencyError,
    GTFSIntegrityError,
    GTFSParseError,
    GTFSRequiredFieldMissingError,
    GTFSRequiredFileMissingError,
    GTFSRequiredFileSetMissingError,
)
from gtfs_io.feed import GTFSFeed
from gtfs_io.files.csv_stream import LinePreprocessor
from gtfs_io.files.sources import GTFSSourceFile, open_feed_source
from gtfs_io.schemas import ENTITY_BY_FILE, GTFSEntity
from gtfs_io.services.field_codecs import FILE_CODECS, FieldCodec, build_codec_map, clean_value

logger = logging.getLogger(__name__)

REQUIRED_FILES = ["agency", "stops", "routes", "trips", "stop_times"]

# at least one file of every set must be present
REQUIRED_FILE_SETS = [{"calendar", "calendar_dates"}]

# file -> files that must be read before it
DEPENDENCIES: Dict[str, Set[str]] = {
    "fare_rules": {"routes"},
    "frequencies": {"trips"},
    "routes": {"agency"},
    "stop_times": {"trips"},
    "trips": {"routes"},
    "transfers": {"stops"},
}

REQUIRED_FIELDS: Dict[str, List[str]] = {
    "agency": ["agency_name", "agency_url", "agency_timezone"],
    "attributions": ["organization_name"],
    "calendar": [
        "service_id", "monday", "tuesday", "wednesday", "thursday",
        "friday", "saturday", "sunday", "start_date", "end_date",
    ],
    "calendar_dates": ["service_id", "date", "exception_type"],
    "fare_attributes": ["fare_id", "price", "currency_type", "payment_method", "transfers"],
    "fare_rules": ["fare_id"],
    "feed_info": ["feed_publisher_name", "feed_publisher_url", "feed_lang"],
    "frequencies": ["trip_id", "start_time", "end_time", "headway_secs"],
    "levels": ["level_id", "level_index"],
    "pathways": ["pathway_id", "from_stop_id", "to_stop_id", "pathway_mode", "is_bidirectional"],
    "routes": ["route_id", "route_short_name", "route_long_name", "route_type"],
    "shapes": ["shape_id", "shape_pt_lat", "shape_pt_lon", "shape_pt_sequence"],
    "stop_times": ["trip_id", "arrival_time", "departure_time", "stop_id", "stop_sequence"],
    "stops": ["stop_id", "stop_name", "stop_lat", "stop_lon"],
    "transfers": ["from_stop_id", "to_stop_id", "transfer_type"],
    "trips": ["trip_id", "route_id", "service_id"],
}

# key fields that become required once the feed already holds an entity of that file
CONDITIONAL_KEY_FIELDS: Dict[str, str] = {
    "agency": "agency_id",
    "attributions": "attribution_id",
}


class FieldMap:
    """Maps expected GTFS column names to the names used by a producer"""

    def __init__(self):
        self._expected_to_actual: Dict[str, str] = {}
        self._actual_to_expected: Dict[str, str] = {}

    def add(self, expected: str, actual: str) -> None:
        self._expected_to_actual[expected] = actual
        self._actual_to_expected[actual] = expected

    def clear(self) -> None:
        self._expected_to_actual.clear()
        self._actual_to_expected.clear()

    def get_actual(self, expected: str) -> str:
        return self._expected_to_actual.get(expected, expected)

    def get_expected(self, actual: str) -> str:
        return self._actual_to_expected.get(actual, actual)


class GTFSSourceFileHeader:
    """Header row of a source file"""

    def __init__(self, name: str, columns: List[str]):
        self.name = name
        self.columns = columns
        self._index = {}
        for idx, column in enumerate(columns):
            self._index.setdefault(column, idx)

    def has_column(self, column: str) -> bool:
        return column in self._index

    def get_column(self, idx: int) -> str:
        return self.columns[idx]

    def get_index(self, column: str) -> Optional[int]:
        return self._index.get(column)

    def __len__(self) -> int:
        return len(self.columns)


class GTFSReader:
    """Reads source files into a feed

    ``strict`` enables the required file, file set and field checks and
    makes every malformed value an error. Tables (required files, file
    sets, dependencies, required fields, field maps and codecs) are
    instance attributes and can be changed before reading.
    """

    def __init__(
        self,
        strict: Optional[bool] = None,
        config: Optional[ParserConfig] = None,
        date_parser: Optional[Callable[[str], dt.date]] = None,
        line_preprocessor: Optional[LinePreprocessor] = None,
        codecs: Optional[Dict[Tuple[str, str], FieldCodec]] = None,
        feed_factory: Callable[[], GTFSFeed] = GTFSFeed,
    ):
        if config is None:
            if strict is None:
                config = ParserConfig.from_settings()
            elif strict:
                config = ParserConfig.strict_mode()
            else:
                config = ParserConfig.lenient_mode()
        self.config = config
        self.line_preprocessor = line_preprocessor
        self.feed_factory = feed_factory

        self.required_files: List[str] = list(REQUIRED_FILES)
        self.required_file_sets: List[Set[str]] = [set(s) for s in REQUIRED_FILE_SETS]
        self.dependencies: Dict[str, Set[str]] = {k: set(v) for k, v in DEPENDENCIES.items()}
        self.required_fields: Dict[str, List[str]] = {k: list(v) for k, v in REQUIRED_FIELDS.items()}
        self.field_maps: Dict[str, FieldMap] = {name: FieldMap() for name in FILE_CODECS}
        self.entity_types: Dict[str, Type[GTFSEntity]] = dict(ENTITY_BY_FILE)
        self.codecs = build_codec_map(codecs, date_parse_fn=date_parser)

    @property
    def strict(self) -> bool:
        return self.config.strict

    def read(self, sources: Iterable[GTFSSourceFile], feed: Optional[GTFSFeed] = None) -> GTFSFeed:
        """Read every source file into feed (a new feed when not given)"""
        feed = feed if feed is not None else self.feed_factory()
        source_files = list(sources)

        if self.strict:
            self.check_required_files(source_files)

        read_names: Set[str] = set()
        unread = list(source_files)
        while unread:
            selected = self.select_next(unread, read_names)
            if selected is None:
                raise GTFSDependencyError()
            self.read_source_file(selected, feed)
            unread.remove(selected)
            read_names.add(selected.name)
        return feed

    def read_file(
        self,
        sources: Iterable[GTFSSourceFile],
        file: Union[str, GTFSSourceFile],
        feed: Optional[GTFSFeed] = None,
    ) -> GTFSFeed:
        """Read one file and, before it, everything it depends on"""
        feed = feed if feed is not None else self.feed_factory()
        source_files = list(sources)
        file_name = file if isinstance(file, str) else file.name

        # breadth-first over the dependency table, read back to front
        files_to_read = [file_name]
        queue = [file_name]
        while queue:
            current = queue.pop(0)
            files_to_read.append(current)
            queue.extend(sorted(self.dependencies.get(current, ())))

        read_names: Set[str] = set()
        for name in reversed(files_to_read):
            if name in read_names:
                continue
            source_file = next((f for f in source_files if f.name == name), None)
            if source_file is None:
                raise GTFSDependencyError(f"File {name} is needed to read {file_name} but is not in the sources.")
            self.read_source_file(source_file, feed)
            read_names.add(name)
        return feed

    def check_required_files(self, source_files: List[GTFSSourceFile]) -> None:
        names = {f.name for f in source_files}
        for required in self.required_files:
            if required not in names:
                raise GTFSRequiredFileMissingError(required)
        for file_set in self.required_file_sets:
            if not file_set & names:
                raise GTFSRequiredFileSetMissingError(file_set)

    def select_next(self, unread: List[GTFSSourceFile], read_names: Set[str]) -> Optional[GTFSSourceFile]:
        """First unread file, in source order, whose dependencies have all been read"""
        for source_file in unread:
            dependencies = self.dependencies.get(source_file.name)
            if dependencies is None or dependencies <= read_names:
                return source_file
        return None

    def read_source_file(self, source_file: GTFSSourceFile, feed: GTFSFeed) -> None:
        """Parse all rows of one file and add the entities to feed"""
        name = source_file.name
        entity_type = self.entity_types.get(name)
        if entity_type is None:
            logger.debug(f"Skipping unknown file {name}")
            return

        source_file.line_preprocessor = self.line_preprocessor
        with closing(source_file.rows()) as rows:
            first = next(rows, None)
            if first is None:
                return
            header = GTFSSourceFileHeader(name, [clean_value(self.config, column) for column in first])

            count = 0
            if entity_type.natural_order:
                entities = []
                for line, row in enumerate(rows, start=2):
                    entities.append(self.parse_entity(feed, header, row, entity_type, line))
                entities.sort(key=lambda entity: entity.sort_key())
                for entity in entities:
                    feed.add(entity)
                count = len(entities)
            else:
                for line, row in enumerate(rows, start=2):
                    feed.add(self.parse_entity(feed, header, row, entity_type, line))
                    count += 1
        logger.info(f"Read {count} rows from {name}")

    def parse_entity(
        self,
        feed: GTFSFeed,
        header: GTFSSourceFileHeader,
        row: List[str],
        entity_type: Type[GTFSEntity],
        line: Optional[int] = None,
    ) -> GTFSEntity:
        """Check required fields, then set every known column on a new entity"""
        name = header.name
        self.check_required_fields(feed, header, line)

        field_map = self.field_maps.get(name) or FieldMap()
        entity = entity_type()
        for idx, value in enumerate(row):
            if idx >= len(header):
                break
            field_name = field_map.get_expected(header.get_column(idx))
            codec = self.codecs.get((name, field_name))
            if codec is None:
                continue
            try:
                setattr(entity, field_name, codec.parse(self.config, name, field_name, value))
            except GTFSParseError as e:
                raise e.with_line(line) if line is not None else e

        if self.strict and entity.key_field in self.required_fields.get(name, ()) and not entity.key:
            raise GTFSIntegrityError(name, entity.key_field, entity.key)
        return entity

    def check_required_fields(self, feed: GTFSFeed, header: GTFSSourceFileHeader, line: Optional[int] = None) -> None:
        if not self.strict:
            return
        name = header.name
        field_map = self.field_maps.get(name) or FieldMap()
        required = list(self.required_fields.get(name, ()))
        conditional = CONDITIONAL_KEY_FIELDS.get(name)
        if conditional is not None:
            collection = feed.collection_for(name)
            if collection is not None and len(collection) > 0:
                required.append(conditional)
        for field_name in required:
            actual = field_map.get_actual(field_name)
            if not header.has_column(actual):
                raise GTFSRequiredFieldMissingError(name, actual, line)


def read_feed(path: str, strict: bool = False, **kwargs) -> GTFSFeed:
    """Read a feed from a directory or a zip archive"""
    reader = GTFSReader(strict=strict, **kwargs)
    with open_feed_source(path) as source:
        feed = reader.read(source)
    logger.info(f"Read feed from {path}: {feed.summary()}")
    return feed
