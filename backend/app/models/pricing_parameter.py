from sqlalchemy import Boolean, Column, ForeignKey, Integer, JSON, Numeric, String, Text

from .base import BaseModel, new_id


# Where a pricing variable is offered.
PRICING_DISPLAY_CHOICES = (
    "Customer Frontend, Backend & Admin",
    "Customer Backend & Admin",
    "Admin Only",
)


class PricingParameter(BaseModel):
    __tablename__ = "industry_pricing_parameter"

    id = Column(String(32), primary_key=True, default=new_id)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    industry_id = Column(String(32), ForeignKey("industries.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    variable_category = Column(String, nullable=False)
    price = Column(Numeric(10, 2), default=0, nullable=False)
    time_minutes = Column(Integer, default=0, nullable=False)
    display = Column(String, default=PRICING_DISPLAY_CHOICES[0], nullable=False)
    service_category = Column(String, nullable=True)
    service_category2 = Column(String, nullable=True)
    frequency = Column(String, nullable=True)
    is_default = Column(Boolean, default=False, nullable=False)
    show_based_on_frequency = Column(Boolean, default=False, nullable=False)
    show_based_on_service_category = Column(Boolean, default=False, nullable=False)
    show_based_on_service_category2 = Column(Boolean, default=False, nullable=False)
    excluded_extras = Column(JSON, nullable=False, default=list)
    excluded_services = Column(JSON, nullable=False, default=list)
    excluded_providers = Column(JSON, nullable=False, default=list)
    exclude_parameters = Column(JSON, nullable=False, default=list)
    sort_order = Column(Integer, default=0, nullable=False)
