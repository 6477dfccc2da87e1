"""GTFS read/write exceptions"""

from typing import Any, Dict, Iterable, Optional


class GTFSError(Exception):
    """Base exception for everything raised by gtfs_io"""

    def __init__(self, message: str, code: str = "GTFS_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting"""
        return {"code": self.code, "message": self.message}


class GTFSRequiredFileMissingError(GTFSError):
    """A required file is not part of the source set"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Required file {name} is missing.", "REQUIRED_FILE_MISSING")

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "file": self.name}


class GTFSRequiredFileSetMissingError(GTFSError):
    """None of the files of a required alternative set is present"""

    def __init__(self, file_set: Iterable[str]):
        self.file_set = sorted(file_set)
        super().__init__(
            f"At least one of the files {', '.join(self.file_set)} is required.",
            "REQUIRED_FILE_SET_MISSING",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "files": self.file_set}


class GTFSRequiredFieldMissingError(GTFSError):
    """A required column is not in the header of a file"""

    def __init__(self, name: str, field_name: str, line: Optional[int] = None):
        self.name = name
        self.field_name = field_name
        self.line = line
        super().__init__(
            f"Required field {field_name} missing in file {name}.",
            "REQUIRED_FIELD_MISSING",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "file": self.name, "field": self.field_name, "line": self.line}


class GTFSParseError(GTFSError):
    """A cell value could not be converted to its field type"""

    def __init__(
        self,
        name: str,
        field_name: str,
        value: Optional[str],
        inner: Optional[BaseException] = None,
        line: Optional[int] = None,
    ):
        self.name = name
        self.field_name = field_name
        self.value = value
        self.inner = inner
        self.line = line
        message = f"Could not parse value '{value}' of field {field_name} in file {name}"
        if line is not None:
            message += f" (line {line})"
        if inner is not None:
            message += f": {inner}"
        super().__init__(message, "PARSE_ERROR")

    def with_line(self, line: int) -> "GTFSParseError":
        """Copy of this error that also carries the source line number"""
        return GTFSParseError(self.name, self.field_name, self.value, self.inner, line)

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "file": self.name,
            "field": self.field_name,
            "value": self.value,
            "line": self.line,
        }


class GTFSIntegrityError(GTFSError):
    """A row has no value for the key field identifying it"""

    def __init__(self, name: str, field_name: str, value: Optional[str]):
        self.name = name
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Integrity violation in {name}: {field_name}='{value}'",
            "INTEGRITY_ERROR",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "file": self.name, "field": self.field_name, "value": self.value}


class GTFSDependencyError(GTFSError):
    """The dependency table and the source files are inconsistent"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "Could not select a next file based on the current dependency tree and the current file list.",
            "DEPENDENCY_ERROR",
        )


class GTFSSourceError(GTFSError):
    """A source or target location cannot be opened"""

    def __init__(self, location: str, reason: str):
        self.location = location
        super().__init__(f"Cannot open {location}: {reason}", "SOURCE_ERROR")
