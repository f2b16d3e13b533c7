# backend/app/models/booking.py

from sqlalchemy import Column, Integer, Numeric, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel, new_id
from .booking_status import BookingStatus
from .types import CaseInsensitiveEnum


class Booking(BaseModel):
    __tablename__ = "bookings"

    id              = Column(String(32), primary_key=True, default=new_id)
    business_id     = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    customer_name   = Column(String, nullable=False, default="")
    customer_email  = Column(String, nullable=True)
    customer_phone  = Column(String, nullable=True)
    service         = Column(String, nullable=False, default="")
    address         = Column(String, nullable=True)
    # Calendar date as ``yyyy-MM-dd``; compared as a string, never tz-converted.
    date            = Column(String(10), nullable=False, index=True)
    time            = Column(String, nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    frequency       = Column(String, nullable=True)
    status          = Column(
        CaseInsensitiveEnum(BookingStatus),
        default=BookingStatus.PENDING,
        nullable=False,
        index=True,
    )
    amount          = Column(Numeric(10, 2), nullable=True)
    payment_method  = Column(String, nullable=True)
    notes           = Column(Text, nullable=True)
    provider_id     = Column(String(32), ForeignKey("service_providers.id", ondelete="SET NULL"), nullable=True, index=True)
    # Denormalized provider display name.
    assigned_provider = Column(String, nullable=True)

    # Relationships
    provider = relationship("ServiceProvider", back_populates="bookings")
