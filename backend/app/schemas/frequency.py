from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FrequencyBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    different_on_customer_end: Optional[bool] = None
    show_explanation: Optional[bool] = None
    enable_popup: Optional[bool] = None
    display: Optional[str] = None
    occurrence_time: Optional[str] = None
    discount: Optional[float] = None
    discount_type: Optional[str] = None
    is_default: Optional[bool] = None
    excluded_providers: Optional[list[str]] = None
    frequency_repeats: Optional[str] = None
    shorter_job_length: Optional[str] = None
    shorter_job_length_by: Optional[str] = None
    exclude_first_appointment: Optional[bool] = None
    frequency_discount: Optional[str] = None
    charge_one_time_price: Optional[bool] = None
    add_to_other_industries: Optional[bool] = None
    enabled_industries: Optional[list[str]] = None
    show_based_on_location: Optional[bool] = None
    location_ids: Optional[list[str]] = None
    service_categories: Optional[list[str]] = None
    bathroom_variables: Optional[list[str]] = None
    sqft_variables: Optional[list[str]] = None
    bedroom_variables: Optional[list[str]] = None
    exclude_parameters: Optional[list[str]] = None
    extras: Optional[list[str]] = None
    sort_order: Optional[int] = None


class FrequencyCreate(FrequencyBase):
    business_id: Optional[str] = None
    industry_id: Optional[str] = None


class FrequencyUpdate(FrequencyBase):
    id: Optional[str] = None
    is_active: Optional[bool] = None


class FrequencyRead(BaseModel):
    id: str
    business_id: str
    industry_id: str
    name: str
    description: Optional[str] = None
    different_on_customer_end: bool = False
    show_explanation: bool = False
    enable_popup: bool = False
    display: str = "Both"
    occurrence_time: str
    discount: float = 0.0
    discount_type: str = "%"
    is_default: bool = False
    is_active: bool = True
    excluded_providers: list[str] = Field(default_factory=list)
    frequency_repeats: Optional[str] = None
    shorter_job_length: str = "no"
    shorter_job_length_by: Optional[str] = None
    exclude_first_appointment: bool = False
    frequency_discount: str = "all"
    charge_one_time_price: bool = False
    add_to_other_industries: bool = False
    enabled_industries: list[str] = Field(default_factory=list)
    show_based_on_location: bool = False
    location_ids: list[str] = Field(default_factory=list)
    service_categories: list[str] = Field(default_factory=list)
    bathroom_variables: list[str] = Field(default_factory=list)
    sqft_variables: list[str] = Field(default_factory=list)
    bedroom_variables: list[str] = Field(default_factory=list)
    exclude_parameters: list[str] = Field(default_factory=list)
    extras: list[str] = Field(default_factory=list)
    sort_order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
