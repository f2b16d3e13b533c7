from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LocationBase(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = Field(default=None, validation_alias=AliasChoices("postalCode", "postal_code"))
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: Optional[str] = None
    active: Optional[bool] = None


class LocationCreate(LocationBase):
    business_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("business_id", "businessId"))


class LocationUpdate(LocationCreate):
    id: Optional[str] = None


class LocationRead(BaseModel):
    id: str
    business_id: str
    name: str
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: Optional[str] = None
    active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ServiceAreaRequest(BaseModel):
    """A shape drawn on the map: ``{"type": "polygon"|"rectangle"|"circle", ...}``."""

    shape: Optional[dict[str, Any]] = None


class ServiceAreaResponse(BaseModel):
    zipcodes: list[str]
    count: int
