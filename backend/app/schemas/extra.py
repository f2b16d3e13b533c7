from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ExtraBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    time_minutes: Optional[int] = None
    service_category: Optional[str] = None
    price: Optional[float] = None
    display: Optional[str] = None
    qty_based: Optional[bool] = None
    exempt_from_discount: Optional[bool] = None
    service_checklists: Optional[list[str]] = None
    excluded_providers: Optional[list[str]] = None
    show_based_on_frequency: Optional[bool] = None
    show_based_on_service_category: Optional[bool] = None
    show_based_on_variables: Optional[bool] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class ExtraCreate(ExtraBase):
    industry_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("industryId", "industry_id"))
    business_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("businessId", "business_id"))


class ExtraUpdate(ExtraBase):
    id: Optional[str] = None


class ExtraRead(BaseModel):
    id: str
    business_id: str
    industry_id: str
    name: str
    description: Optional[str] = None
    time_minutes: int = 0
    service_category: Optional[str] = None
    price: float = 0.0
    display: str
    qty_based: bool = False
    exempt_from_discount: bool = False
    service_checklists: list[str] = Field(default_factory=list)
    excluded_providers: list[str] = Field(default_factory=list)
    show_based_on_frequency: bool = False
    show_based_on_service_category: bool = False
    show_based_on_variables: bool = False
    sort_order: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
