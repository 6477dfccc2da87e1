"""
GTFS sources

A source file is a named, lazily enumerated sequence of rows (header
first). Feed sources group source files (a directory, a zip archive)
and are context managers: every handle they open is released when the
block exits, whether reading succeeded or not.
"""

import io
import logging
import os
import zipfile
from typing import IO, Iterator, List, Optional, TextIO, Union

from gtfs_io.core.config import settings
from gtfs_io.core.exceptions import GTFSSourceError
from gtfs_io.files.csv_stream import LinePreprocessor, read_rows

logger = logging.getLogger(__name__)


class GTFSSourceFile:
    """One named table of a feed"""

    def __init__(self, name: str, separator: Optional[str] = None):
        self.name = name
        self.separator = separator or settings.GTFS_SEPARATOR
        self.line_preprocessor: Optional[LinePreprocessor] = None
        self._open_streams = 0

    @property
    def is_open(self) -> bool:
        """True while a row iteration holds the underlying stream"""
        return self._open_streams > 0

    def open(self) -> TextIO:
        raise NotImplementedError

    def rows(self) -> Iterator[List[str]]:
        """Rows of the file; the stream is closed when iteration ends or is closed"""
        stream = self.open()
        self._open_streams += 1
        try:
            yield from read_rows(stream, self.separator, self.line_preprocessor)
        finally:
            self._open_streams -= 1
            stream.close()

    def __iter__(self) -> Iterator[List[str]]:
        return self.rows()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def file_name_of(path: str) -> str:
    """'some/dir/stops.txt' -> 'stops'"""
    return os.path.splitext(os.path.basename(path))[0]


class GTFSFileSource(GTFSSourceFile):
    """A .txt file on disk, reopened for every iteration"""

    def __init__(self, path: str, separator: Optional[str] = None, encoding: Optional[str] = None):
        super().__init__(file_name_of(path), separator)
        self.path = path
        self.encoding = encoding or settings.GTFS_ENCODING

    def open(self) -> TextIO:
        return open(self.path, "r", encoding=self.encoding, newline="")


class GTFSStreamSource(GTFSSourceFile):
    """In-memory table content"""

    def __init__(
        self,
        name: str,
        content: Union[str, bytes],
        separator: Optional[str] = None,
        encoding: Optional[str] = None,
    ):
        super().__init__(name, separator)
        if isinstance(content, bytes):
            content = content.decode(encoding or settings.GTFS_ENCODING)
        self.content = content.lstrip("\ufeff")

    @classmethod
    def from_stream(cls, name: str, stream: IO, encoding: Optional[str] = None) -> "GTFSStreamSource":
        """Read a text or binary stream fully and close it"""
        with stream:
            return cls(name, stream.read(), encoding=encoding)

    def open(self) -> TextIO:
        return io.StringIO(self.content, newline="")


class GTFSFeedSource:
    """Base for groups of source files"""

    def __init__(self):
        self.files: List[GTFSSourceFile] = []
        self.closed = False

    def __iter__(self) -> Iterator[GTFSSourceFile]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def get(self, name: str) -> Optional[GTFSSourceFile]:
        for source_file in self.files:
            if source_file.name == name:
                return source_file
        return None

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "GTFSFeedSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class GTFSDirectorySource(GTFSFeedSource):
    """Every .txt file of a directory, in file name order"""

    def __init__(self, path: str, separator: Optional[str] = None, encoding: Optional[str] = None):
        super().__init__()
        if not os.path.isdir(path):
            raise GTFSSourceError(path, "not a directory")
        self.path = path
        for entry in sorted(os.listdir(path)):
            full_path = os.path.join(path, entry)
            if entry.lower().endswith(".txt") and os.path.isfile(full_path):
                self.files.append(GTFSFileSource(full_path, separator, encoding))
        logger.debug(f"Directory source {path}: {[f.name for f in self.files]}")


class GTFSZipMemberSource(GTFSSourceFile):
    """A .txt member of an open zip archive"""

    def __init__(self, archive: zipfile.ZipFile, member: str, separator: Optional[str], encoding: str):
        super().__init__(file_name_of(member), separator)
        self.archive = archive
        self.member = member
        self.encoding = encoding

    def open(self) -> TextIO:
        return io.TextIOWrapper(self.archive.open(self.member), encoding=self.encoding, newline="")


class GTFSZipSource(GTFSFeedSource):
    """Every .txt member of a zip archive, in archive order

    The archive stays open until close() (or the end of the with block).
    """

    def __init__(
        self,
        path_or_stream: Union[str, IO[bytes]],
        separator: Optional[str] = None,
        encoding: Optional[str] = None,
    ):
        super().__init__()
        location = path_or_stream if isinstance(path_or_stream, str) else "<stream>"
        try:
            self.archive = zipfile.ZipFile(path_or_stream, "r")
        except (OSError, zipfile.BadZipFile) as e:
            raise GTFSSourceError(location, str(e))
        encoding = encoding or settings.GTFS_ENCODING
        for info in self.archive.infolist():
            if info.is_dir() or not info.filename.lower().endswith(".txt"):
                continue
            # skip macOS metadata entries
            if info.filename.startswith("__MACOSX/"):
                continue
            self.files.append(GTFSZipMemberSource(self.archive, info.filename, separator, encoding))
        logger.debug(f"Zip source {location}: {[f.name for f in self.files]}")

    def close(self) -> None:
        if not self.closed:
            self.archive.close()
        super().close()


def open_feed_source(path: str, separator: Optional[str] = None, encoding: Optional[str] = None) -> GTFSFeedSource:
    """Directory or zip source for a path"""
    if os.path.isdir(path):
        return GTFSDirectorySource(path, separator, encoding)
    if zipfile.is_zipfile(path):
        return GTFSZipSource(path, separator, encoding)
    raise GTFSSourceError(path, "neither a directory nor a zip archive")
