import io
import zipfile

import pytest

from gtfs_io.core.exceptions import GTFSSourceError
from gtfs_io.files import (
    GTFSDirectorySource,
    GTFSDirectoryTarget,
    GTFSFileTarget,
    GTFSMemoryTarget,
    GTFSStreamSource,
    GTFSStreamTarget,
    GTFSZipSource,
    GTFSZipTarget,
    open_feed_source,
)


def test_directory_source_lists_txt_files(sample_feed_dir):
    """Test that a directory source holds one source file per .txt file, sorted by name."""
    with GTFSDirectorySource(sample_feed_dir) as source:
        names = [f.name for f in source]
    assert names == sorted(names)
    assert "stops" in names
    assert "feed_info" in names
    assert len(names) == 14


def test_directory_source_requires_directory(tmp_path):
    with pytest.raises(GTFSSourceError):
        GTFSDirectorySource(str(tmp_path / "missing"))


def test_source_rows_close_stream(sample_feed_dir):
    """Test that the stream is released after full and partial iteration."""
    with GTFSDirectorySource(sample_feed_dir) as source:
        stops = source.get("stops")
        rows = list(stops)
        assert rows[0][0] == "stop_id"
        assert len(rows) == 10
        assert not stops.is_open

        iterator = stops.rows()
        next(iterator)
        assert stops.is_open
        iterator.close()
        assert not stops.is_open


def test_stream_source_skips_blank_lines():
    source = GTFSStreamSource("agency", "agency_id,agency_name\n\nDTA,Demo\n")
    assert list(source) == [["agency_id", "agency_name"], ["DTA", "Demo"]]


def test_stream_source_from_bytes_with_bom():
    source = GTFSStreamSource("agency", "agency_id\nDTA\n".encode("utf-8-sig"))
    assert list(source)[0] == ["agency_id"]


def test_stream_source_text_with_bom():
    """Test that a byte order mark in text content does not end up in the header."""
    source = GTFSStreamSource("agency", "\ufeffagency_id,agency_name\nDTA,Demo\n")
    assert list(source)[0] == ["agency_id", "agency_name"]

    source = GTFSStreamSource.from_stream("agency", io.StringIO("\ufeffagency_id\nDTA\n"))
    assert list(source) == [["agency_id"], ["DTA"]]


def test_custom_separator_and_preprocessor():
    source = GTFSStreamSource("agency", "agency_id;agency_name\nDTA;demo\n", separator=";")
    source.line_preprocessor = lambda line: line.upper()
    assert list(source) == [["AGENCY_ID", "AGENCY_NAME"], ["DTA", "DEMO"]]


def test_zip_source(tmp_path, sample_feed_dir):
    """Test that zip sources skip directories, non-txt members and macOS metadata."""
    path = tmp_path / "feed.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.write(f"{sample_feed_dir}/agency.txt", "agency.txt")
        zf.write(f"{sample_feed_dir}/stops.txt", "gtfs/stops.txt")
        zf.writestr("__MACOSX/._agency.txt", "junk")
        zf.writestr("readme.md", "not gtfs")

    source = GTFSZipSource(str(path))
    with source:
        assert [f.name for f in source] == ["agency", "stops"]
        assert list(source.get("agency"))[1][0] == "DTA"
    assert source.closed


def test_open_feed_source(tmp_path, sample_feed_dir):
    with open_feed_source(sample_feed_dir) as source:
        assert isinstance(source, GTFSDirectorySource)

    not_a_feed = tmp_path / "feed.txt"
    not_a_feed.write_text("nothing")
    with pytest.raises(GTFSSourceError):
        open_feed_source(str(not_a_feed))


def test_stream_target():
    target = GTFSStreamTarget("agency")
    assert not target.exists
    target.write(["agency_id", "agency_name"])
    target.write(["DTA", '"Demo"'])
    assert target.exists
    assert target.lines() == ["agency_id,agency_name", 'DTA,"Demo"']
    target.clear()
    assert not target.exists


def test_file_target_clear(tmp_path):
    """Test that clearing a file target truncates the file."""
    path = tmp_path / "stops.txt"
    target = GTFSFileTarget(str(path))
    assert target.name == "stops"
    assert not target.exists
    target.write(["stop_id"])
    target.write(["S1"])
    target.close()
    assert path.read_text() == "stop_id\nS1\n"

    target.clear()
    target.write(["stop_id"])
    target.close()
    assert path.read_text() == "stop_id\n"


def test_directory_target(tmp_path):
    path = tmp_path / "out"
    with GTFSDirectoryTarget(str(path)) as target:
        target["agency"].write(["agency_id"])
    assert (path / "agency.txt").read_text() == "agency_id\n"
    assert not (path / "stops.txt").exists()


def test_memory_target_files():
    target = GTFSMemoryTarget(separator=";")
    target["routes"].write(["route_id", "route_type"])
    assert target.files() == {"routes": "route_id;route_type\n"}


def test_zip_target(tmp_path):
    """Test that a zip target writes only non-empty files when closed."""
    path = tmp_path / "out.zip"
    with GTFSZipTarget(str(path)) as target:
        target["agency"].write(["agency_id"])
        target["agency"].write(["DTA"])
    with zipfile.ZipFile(path) as zf:
        assert zf.namelist() == ["agency.txt"]
        assert zf.read("agency.txt").decode() == "agency_id\nDTA\n"
