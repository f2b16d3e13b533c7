from sqlalchemy import Boolean, Column, ForeignKey, Integer, JSON, Numeric, String, Text, UniqueConstraint

from .base import BaseModel, new_id


class IndustryFrequency(BaseModel):
    """How often a job repeats (weekly, bi-weekly, ...) for one industry."""

    __tablename__ = "industry_frequency"
    __table_args__ = (
        UniqueConstraint("industry_id", "name", name="uq_industry_frequency_industry_name"),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    industry_id = Column(String(32), ForeignKey("industries.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    different_on_customer_end = Column(Boolean, default=False, nullable=False)
    show_explanation = Column(Boolean, default=False, nullable=False)
    enable_popup = Column(Boolean, default=False, nullable=False)
    display = Column(String, default="Both", nullable=False)
    occurrence_time = Column(String, nullable=False)
    discount = Column(Numeric(10, 2), default=0, nullable=False)
    discount_type = Column(String, default="%", nullable=False)
    is_default = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    excluded_providers = Column(JSON, nullable=False, default=list)
    frequency_repeats = Column(String, nullable=True)
    shorter_job_length = Column(String, default="no", nullable=False)
    shorter_job_length_by = Column(String, nullable=True)
    exclude_first_appointment = Column(Boolean, default=False, nullable=False)
    frequency_discount = Column(String, default="all", nullable=False)
    charge_one_time_price = Column(Boolean, default=False, nullable=False)
    add_to_other_industries = Column(Boolean, default=False, nullable=False)
    enabled_industries = Column(JSON, nullable=False, default=list)
    show_based_on_location = Column(Boolean, default=False, nullable=False)
    location_ids = Column(JSON, nullable=False, default=list)
    service_categories = Column(JSON, nullable=False, default=list)
    bathroom_variables = Column(JSON, nullable=False, default=list)
    sqft_variables = Column(JSON, nullable=False, default=list)
    bedroom_variables = Column(JSON, nullable=False, default=list)
    exclude_parameters = Column(JSON, nullable=False, default=list)
    extras = Column(JSON, nullable=False, default=list)
    sort_order = Column(Integer, default=0, nullable=False)
