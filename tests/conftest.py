import os
import shutil

import pytest

from gtfs_io.files import GTFSDirectorySource, GTFSStreamSource
from gtfs_io.services.gtfs_reader import GTFSReader

SAMPLE_FEED_DIR = os.path.join(os.path.dirname(__file__), "data", "sample_feed")


def stream_sources(files):
    """Stream sources from a {name: content} dict"""
    return [GTFSStreamSource(name, content) for name, content in files.items()]


@pytest.fixture
def sample_feed_dir():
    return SAMPLE_FEED_DIR


@pytest.fixture
def sample_source():
    with GTFSDirectorySource(SAMPLE_FEED_DIR) as source:
        yield source


@pytest.fixture
def sample_feed(sample_source):
    return GTFSReader(strict=False).read(sample_source)


@pytest.fixture
def strict_feed(sample_source):
    return GTFSReader(strict=True).read(sample_source)


@pytest.fixture
def sample_feed_copy(tmp_path):
    """Writable copy of the sample feed directory"""
    target = tmp_path / "sample_feed"
    shutil.copytree(SAMPLE_FEED_DIR, target)
    return target
