from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PricingParameterBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    variable_category: Optional[str] = None
    price: Optional[float] = None
    time_minutes: Optional[int] = None
    display: Optional[str] = None
    service_category: Optional[str] = None
    service_category2: Optional[str] = None
    frequency: Optional[str] = None
    is_default: Optional[bool] = None
    show_based_on_frequency: Optional[bool] = None
    show_based_on_service_category: Optional[bool] = None
    show_based_on_service_category2: Optional[bool] = None
    excluded_extras: Optional[list[str]] = None
    excluded_services: Optional[list[str]] = None
    excluded_providers: Optional[list[str]] = None
    exclude_parameters: Optional[list[str]] = None
    sort_order: Optional[int] = None


class PricingParameterCreate(PricingParameterBase):
    business_id: Optional[str] = None
    industry_id: Optional[str] = None


class PricingParameterUpdate(PricingParameterBase):
    id: Optional[str] = None


class PricingParameterRead(BaseModel):
    id: str
    business_id: str
    industry_id: str
    name: str
    description: Optional[str] = None
    variable_category: str
    price: float = 0.0
    time_minutes: int = 0
    display: str
    service_category: Optional[str] = None
    service_category2: Optional[str] = None
    frequency: Optional[str] = None
    is_default: bool = False
    show_based_on_frequency: bool = False
    show_based_on_service_category: bool = False
    show_based_on_service_category2: bool = False
    excluded_extras: list[str] = Field(default_factory=list)
    excluded_services: list[str] = Field(default_factory=list)
    excluded_providers: list[str] = Field(default_factory=list)
    exclude_parameters: list[str] = Field(default_factory=list)
    sort_order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SortUpdate(BaseModel):
    id: str
    sort_order: int

    @field_validator("sort_order", mode="before")
    @classmethod
    def _strict_number(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("sort_order must be a number")
        return v
