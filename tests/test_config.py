import pytest
from pydantic import ValidationError

from gtfs_io.core.config import FailurePolicy, ParserConfig, Settings
from gtfs_io.core.exceptions import GTFSParseError, GTFSRequiredFileSetMissingError


def test_settings_defaults():
    """Test that settings fall back to GTFS defaults."""
    settings = Settings()
    assert settings.GTFS_DATE_FORMAT == "%Y%m%d"
    assert settings.GTFS_SEPARATOR == ","
    assert settings.DATABASE_URL.startswith("sqlite")


def test_separator_must_be_one_character():
    """Test that multi-character separators are rejected."""
    with pytest.raises(ValidationError):
        Settings(GTFS_SEPARATOR=";;")


def test_parser_config_modes():
    """Test strict and lenient parser configs."""
    strict = ParserConfig.strict_mode()
    assert strict.strict
    assert not strict.strip_quotes
    assert strict.time_failure == FailurePolicy.RAISE

    lenient = ParserConfig.lenient_mode()
    assert not lenient.strict
    assert lenient.strip_quotes
    assert lenient.coordinate_failure == FailurePolicy.DEFAULT


def test_parser_config_from_settings():
    """Test that the strict flag and date format come from settings."""
    config = ParserConfig.from_settings(Settings(GTFS_STRICT=True, GTFS_DATE_FORMAT="%Y-%m-%d"))
    assert config.strict
    assert config.date_format == "%Y-%m-%d"


def test_error_to_dict():
    """Test that errors serialize their context."""
    error = GTFSParseError("stops", "stop_lat", "abc", line=4)
    data = error.to_dict()
    assert data["code"] == "PARSE_ERROR"
    assert data["file"] == "stops"
    assert data["line"] == 4
    assert "line 4" in error.message

    file_set_error = GTFSRequiredFileSetMissingError({"calendar_dates", "calendar"})
    assert file_set_error.file_set == ["calendar", "calendar_dates"]
