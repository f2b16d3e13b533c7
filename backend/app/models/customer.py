from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, JSON, Numeric, String

from .base import BaseModel


class Customer(BaseModel):
    __tablename__ = "customers"

    # ``CUST<epoch ms>`` unless the caller supplies one.
    id = Column(String(64), primary_key=True)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True, index=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")
    tags = Column(JSON, nullable=False, default=list)
    access_blocked = Column(Boolean, default=False, nullable=False)
    booking_blocked = Column(Boolean, default=False, nullable=False)
    email_notifications = Column(Boolean, default=True, nullable=False)
    join_date = Column(Date, nullable=True)
    total_bookings = Column(Integer, default=0, nullable=False)
    total_spent = Column(Numeric(10, 2), default=0, nullable=False)
    last_booking = Column(String(10), nullable=True)
