from datetime import date, datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    business_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("businessId", "business_id"))
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class CustomerUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    status: Optional[str] = None
    tags: Optional[list[str]] = None
    access_blocked: Optional[bool] = Field(default=None, validation_alias=AliasChoices("accessBlocked", "access_blocked"))
    booking_blocked: Optional[bool] = Field(
        default=None, validation_alias=AliasChoices("bookingBlocked", "booking_blocked")
    )
    email_notifications: Optional[bool] = Field(
        default=None, validation_alias=AliasChoices("emailNotifications", "email_notifications")
    )


class CustomerRead(BaseModel):
    id: str
    business_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    status: str = "active"
    tags: list[str] = Field(default_factory=list)
    access_blocked: bool = Field(default=False, serialization_alias="accessBlocked")
    booking_blocked: bool = Field(default=False, serialization_alias="bookingBlocked")
    email_notifications: bool = Field(default=True, serialization_alias="emailNotifications")
    join_date: Optional[date] = Field(default=None, serialization_alias="joinDate")
    total_bookings: int = Field(default=0, serialization_alias="totalBookings")
    total_spent: str = Field(default="$0.00", serialization_alias="totalSpent")
    last_booking: Optional[str] = Field(default=None, serialization_alias="lastBooking")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
