"""Fare attribute (fare_attributes.txt) entity"""

from typing import Optional
from pydantic import Field

from gtfs_io.schemas.base import GTFSEntity
from gtfs_io.schemas.enums import PaymentMethodType


class FareAttribute(GTFSEntity):
    """Fare class price and transfer rules"""

    file_name = "fare_attributes"
    key_field = "fare_id"

    fare_id: Optional[str] = Field(None, description="GTFS fare_id")
    price: Optional[str] = Field(None, description="Fare price in currency_type units")
    currency_type: Optional[str] = Field(None, description="ISO 4217 currency code")
    payment_method: Optional[PaymentMethodType] = Field(None, description="0=on board, 1=before boarding")
    transfers: Optional[int] = Field(None, ge=0, description="Number of transfers permitted")
    agency_id: Optional[str] = Field(None, description="GTFS agency_id")
    transfer_duration: Optional[str] = Field(None, description="Length of time in seconds before a transfer expires")
