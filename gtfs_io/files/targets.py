"""
GTFS targets

A target is a named sink for rows of one GTFS file. Feed targets group
one target per known file name.
"""

import io
import logging
import os
import zipfile
from typing import Dict, Iterable, Iterator, List, Optional, TextIO

from gtfs_io.core.config import settings
from gtfs_io.files.csv_stream import join_row
from gtfs_io.schemas import ENTITY_BY_FILE

logger = logging.getLogger(__name__)


class GTFSTarget:
    """Named, clearable row sink"""

    def __init__(self, name: str, separator: Optional[str] = None):
        self.name = name
        self.separator = separator or settings.GTFS_SEPARATOR

    @property
    def exists(self) -> bool:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def write(self, row: List[str]) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class GTFSFileTarget(GTFSTarget):
    """A .txt file on disk, opened lazily on first write"""

    def __init__(self, path: str, separator: Optional[str] = None, encoding: str = "utf-8"):
        super().__init__(os.path.splitext(os.path.basename(path))[0], separator)
        self.path = path
        self.encoding = encoding
        self._stream: Optional[TextIO] = None

    @property
    def exists(self) -> bool:
        return os.path.exists(self.path)

    def clear(self) -> None:
        self.close()
        with open(self.path, "w", encoding=self.encoding):
            pass

    def write(self, row: List[str]) -> None:
        if self._stream is None:
            self._stream = open(self.path, "a", encoding=self.encoding, newline="")
        self._stream.write(join_row(row, self.separator) + "\n")

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None


class GTFSStreamTarget(GTFSTarget):
    """In-memory target, content available through getvalue()"""

    def __init__(self, name: str, separator: Optional[str] = None):
        super().__init__(name, separator)
        self._buffer = io.StringIO()

    @property
    def exists(self) -> bool:
        return self._buffer.tell() > 0

    def clear(self) -> None:
        self._buffer = io.StringIO()

    def write(self, row: List[str]) -> None:
        self._buffer.write(join_row(row, self.separator) + "\n")

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def lines(self) -> List[str]:
        return self.getvalue().splitlines()


class GTFSFeedTarget:
    """One target per GTFS file name"""

    def __init__(self, targets: Iterable[GTFSTarget]):
        self.targets: Dict[str, GTFSTarget] = {target.name: target for target in targets}

    def __iter__(self) -> Iterator[GTFSTarget]:
        return iter(self.targets.values())

    def __getitem__(self, name: str) -> GTFSTarget:
        return self.targets[name]

    def get(self, name: str) -> Optional[GTFSTarget]:
        return self.targets.get(name)

    def close(self) -> None:
        for target in self.targets.values():
            target.close()

    def __enter__(self) -> "GTFSFeedTarget":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class GTFSDirectoryTarget(GTFSFeedTarget):
    """Writes <name>.txt files into a directory (created when missing)"""

    def __init__(self, path: str, separator: Optional[str] = None):
        os.makedirs(path, exist_ok=True)
        self.path = path
        super().__init__(
            GTFSFileTarget(os.path.join(path, f"{name}.txt"), separator) for name in ENTITY_BY_FILE
        )


class GTFSMemoryTarget(GTFSFeedTarget):
    """Keeps every written file in memory"""

    def __init__(self, separator: Optional[str] = None):
        super().__init__(GTFSStreamTarget(name, separator) for name in ENTITY_BY_FILE)

    def files(self) -> Dict[str, str]:
        """Non-empty file contents by file name"""
        return {
            name: target.getvalue()
            for name, target in self.targets.items()
            if target.exists
        }


class GTFSZipTarget(GTFSMemoryTarget):
    """Collects files in memory and writes them into one zip archive on close"""

    def __init__(self, path: str, separator: Optional[str] = None):
        super().__init__(separator)
        self.path = path
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        super().close()
        with zipfile.ZipFile(self.path, "w", zipfile.ZIP_DEFLATED) as zf:
            for name, content in self.files().items():
                zf.writestr(f"{name}.txt", content)
        self.closed = True
        logger.info(f"Wrote zip archive {self.path}")
