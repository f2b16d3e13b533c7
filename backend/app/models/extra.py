from sqlalchemy import Boolean, Column, ForeignKey, Integer, JSON, Numeric, String, Text

from .base import BaseModel, new_uuid


EXTRA_DISPLAY_CHOICES = ("frontend-backend-admin", "backend-admin", "admin-only")


class Extra(BaseModel):
    __tablename__ = "extras"

    id = Column(String(36), primary_key=True, default=new_uuid)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    industry_id = Column(String(32), ForeignKey("industries.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    time_minutes = Column(Integer, default=0, nullable=False)
    service_category = Column(String, nullable=True)
    price = Column(Numeric(10, 2), default=0, nullable=False)
    display = Column(String, default=EXTRA_DISPLAY_CHOICES[0], nullable=False)
    qty_based = Column(Boolean, default=False, nullable=False)
    exempt_from_discount = Column(Boolean, default=False, nullable=False)
    service_checklists = Column(JSON, nullable=False, default=list)
    excluded_providers = Column(JSON, nullable=False, default=list)
    show_based_on_frequency = Column(Boolean, default=False, nullable=False)
    show_based_on_service_category = Column(Boolean, default=False, nullable=False)
    show_based_on_variables = Column(Boolean, default=False, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
