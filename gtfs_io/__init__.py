"""Read, hold, validate and write GTFS feeds"""

from gtfs_io.core.config import ParserConfig, settings
from gtfs_io.core.exceptions import (
    GTFSDependencyError,
    GTFSError,
    GTFSIntegrityError,
    GTFSParseError,
    GTFSRequiredFieldMissingError,
    GTFSRequiredFileMissingError,
    GTFSRequiredFileSetMissingError,
    GTFSSourceError,
)
from gtfs_io.feed import GTFSFeed
from gtfs_io.services.gtfs_reader import GTFSReader, read_feed
from gtfs_io.services.gtfs_writer import GTFSWriter, write_feed

__version__ = "0.1.0"

__all__ = [
    "GTFSDependencyError",
    "GTFSError",
    "GTFSFeed",
    "GTFSIntegrityError",
    "GTFSParseError",
    "GTFSReader",
    "GTFSRequiredFieldMissingError",
    "GTFSRequiredFileMissingError",
    "GTFSRequiredFileSetMissingError",
    "GTFSSourceError",
    "GTFSWriter",
    "ParserConfig",
    "read_feed",
    "settings",
    "write_feed",
]
