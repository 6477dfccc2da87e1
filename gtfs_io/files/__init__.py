"""Sources and targets for GTFS files"""

from gtfs_io.files.sources import (
    GTFSDirectorySource,
    GTFSFeedSource,
    GTFSFileSource,
    GTFSSourceFile,
    GTFSStreamSource,
    GTFSZipSource,
    open_feed_source,
)
from gtfs_io.files.targets import (
    GTFSDirectoryTarget,
    GTFSFeedTarget,
    GTFSFileTarget,
    GTFSMemoryTarget,
    GTFSStreamTarget,
    GTFSTarget,
    GTFSZipTarget,
)

__all__ = [
    "GTFSDirectorySource",
    "GTFSDirectoryTarget",
    "GTFSFeedSource",
    "GTFSFeedTarget",
    "GTFSFileSource",
    "GTFSFileTarget",
    "GTFSMemoryTarget",
    "GTFSSourceFile",
    "GTFSStreamSource",
    "GTFSStreamTarget",
    "GTFSTarget",
    "GTFSZipSource",
    "GTFSZipTarget",
    "open_feed_source",
]
