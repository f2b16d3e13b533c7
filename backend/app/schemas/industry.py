from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class IndustryCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    business_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("business_id", "businessId"))
    is_custom: bool = False


class IndustryRead(BaseModel):
    id: str
    business_id: str
    name: str
    description: Optional[str] = None
    is_custom: bool = False
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ServiceCategoryCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    description: Optional[str] = None
    business_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("business_id", "businessId"))
    industry_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("industry_id", "industryId"))
    sort_order: int = 0


class ServiceCategoryRead(BaseModel):
    id: str
    business_id: str
    industry_id: str
    name: str
    description: Optional[str] = None
    sort_order: int = 0
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
