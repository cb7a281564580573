"""
Parcel Pydantic schemas.

Defines the in-memory parcel value exchanged with the store.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from backend.app.models.parcel_enums import ParcelStatus, status_value


def rfc3339_now() -> str:
    """Current UTC time as an RFC3339 string with second precision."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelDTO(BaseModel):
    """Schema for a parcel record."""
    model_config = ConfigDict(from_attributes=True)

    number: int = Field(default=0, description="Store-assigned number, 0 until added")
    client: int = Field(..., description="Client identifier")
    status: str = Field(default=ParcelStatus.REGISTERED.value, description="Lifecycle status")
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(..., description="RFC3339 creation timestamp")

    @field_validator("status", mode="before")
    @classmethod
    def plain_status(cls, value):
        return status_value(value)
