"""Feed info (feed_info.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity


class FeedInfo(GTFSEntity):
    """Publisher and validity of the feed"""

    file_name = "feed_info"

    feed_publisher_name: Optional[str] = Field(None, description="Organisation publishing the feed")
    feed_publisher_url: Optional[str] = Field(None, description="Publisher website")
    feed_lang: Optional[str] = Field(None, description="Default language of the feed")
    feed_start_date: Optional[str] = Field(None, description="First day of validity (YYYYMMDD)")
    feed_end_date: Optional[str] = Field(None, description="Last day of validity (YYYYMMDD)")
    feed_version: Optional[str] = Field(None, description="Version of the dataset")
