"""Library configuration"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Process-wide settings

    Configuration priority:
    1. Environment variables (.env file or system environment)
    2. Default values
    """

    # Parsing
    GTFS_STRICT: bool = Field(
        default=False,
        description="Build strict readers by default (required files/fields are enforced)"
    )
    GTFS_DATE_FORMAT: str = Field(default="%Y%m%d", description="Date format used for date columns")
    GTFS_SEPARATOR: str = Field(default=",", description="Column separator for sources and targets")
    GTFS_ENCODING: str = Field(default="utf-8-sig", description="Text encoding for source files")

    # Database
    DATABASE_URL: str = Field(
        default="sqlite://",
        description="Database connection URL for the SQL feed database",
    )
    DATABASE_ECHO: bool = Field(default=False, description="Echo SQL statements")

    @field_validator("GTFS_SEPARATOR")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separator must be a single character"""
        if len(v) != 1:
            raise ValueError("GTFS_SEPARATOR must be exactly one character")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()


class FailurePolicy(str, Enum):
    """What a codec does with a value it cannot parse"""
    RAISE = "raise"        # raise GTFSParseError
    NONE = "none"          # return no value
    DEFAULT = "default"    # return the field's default value


class ParserConfig(BaseModel):
    """Strictness settings threaded through the reader and the field codecs"""

    model_config = ConfigDict(frozen=True)

    strict: bool = Field(
        default=False,
        description="Check required files, file sets and fields"
    )
    strip_quotes: bool = Field(
        default=True,
        description="Trim cell values and strip matching surrounding double quotes"
    )
    double_failure: FailurePolicy = Field(
        default=FailurePolicy.NONE,
        description="Unparsable double values: raise or return no value"
    )
    coordinate_failure: FailurePolicy = Field(
        default=FailurePolicy.DEFAULT,
        description="Missing/unparsable stop coordinates: raise or use 0.0"
    )
    location_type_failure: FailurePolicy = Field(
        default=FailurePolicy.NONE,
        description="Unknown location_type codes: raise or return no value"
    )
    time_failure: FailurePolicy = Field(
        default=FailurePolicy.DEFAULT,
        description="Malformed times: raise or use 00:00:00"
    )
    date_format: str = Field(default="%Y%m%d", description="strptime/strftime date format")

    @classmethod
    def strict_mode(cls, date_format: str = "%Y%m%d") -> "ParserConfig":
        """Every check enabled, every malformed value is an error"""
        return cls(
            strict=True,
            strip_quotes=False,
            double_failure=FailurePolicy.RAISE,
            coordinate_failure=FailurePolicy.RAISE,
            location_type_failure=FailurePolicy.RAISE,
            time_failure=FailurePolicy.RAISE,
            date_format=date_format,
        )

    @classmethod
    def lenient_mode(cls, date_format: str = "%Y%m%d") -> "ParserConfig":
        """No presence checks, recoverable values degrade silently"""
        return cls(date_format=date_format)

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "ParserConfig":
        """Build the config matching GTFS_STRICT / GTFS_DATE_FORMAT"""
        source = source or settings
        if source.GTFS_STRICT:
            return cls.strict_mode(source.GTFS_DATE_FORMAT)
        return cls.lenient_mode(source.GTFS_DATE_FORMAT)
