from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import BaseModel, new_id


class Business(BaseModel):
    """Tenant. Every other row is scoped by ``business_id``."""

    __tablename__ = "businesses"

    id = Column(String(64), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    owner_email = Column(String, nullable=True)

    industries = relationship("Industry", back_populates="business", cascade="all, delete-orphan")
    store_options = relationship(
        "BusinessStoreOptions",
        back_populates="business",
        uselist=False,
        cascade="all, delete-orphan",
    )


class BusinessStoreOptions(BaseModel):
    __tablename__ = "business_store_options"

    id = Column(Integer, primary_key=True, index=True)
    business_id = Column(String(64), ForeignKey("businesses.id"), unique=True, nullable=False)
    # "manual" or "automatic"; automatic lets the cron job close finished jobs.
    booking_completion_mode = Column(String, nullable=False, default="manual")

    business = relationship("Business", back_populates="store_options")


class Industry(BaseModel):
    __tablename__ = "industries"
    __table_args__ = (
        UniqueConstraint("business_id", "name", name="uq_industries_business_name"),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    is_custom = Column(Boolean, default=False, nullable=False)

    business = relationship("Business", back_populates="industries")


class ServiceCategory(BaseModel):
    __tablename__ = "industry_service_category"

    id = Column(String(32), primary_key=True, default=new_id)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    industry_id = Column(String(32), ForeignKey("industries.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    sort_order = Column(Integer, default=0, nullable=False)
