from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..models.booking_status import BookingStatus


class BookingRead(BaseModel):
    """One booking as the admin console sees it."""

    id: str
    business_id: str
    customer_name: str = ""
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    service: str = ""
    address: Optional[str] = None
    date: str
    time: Optional[str] = None
    status: BookingStatus
    amount: float = 0.0
    payment_method: Optional[str] = None
    notes: Optional[str] = None
    provider_id: Optional[str] = None
    assigned_provider: Optional[str] = Field(default=None, serialization_alias="assignedProvider")
    frequency: Optional[str] = None
    duration_minutes: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True, "populate_by_name": True}

    @field_validator("customer_name", "service", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return v or ""

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, v):
        # Missing or garbage amounts render as zero instead of failing the list.
        if v is None or isinstance(v, bool):
            return 0.0
        try:
            return float(Decimal(str(v)))
        except (InvalidOperation, ValueError):
            return 0.0


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class ProviderAssignment(BaseModel):
    provider_id: str


class BookingListResponse(BaseModel):
    tab: str
    total: int
    counts: dict[str, int]
    bookings: list[BookingRead]
