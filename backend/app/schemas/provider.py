from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ProviderRead(BaseModel):
    id: str
    name: str
    first_name: Optional[str] = Field(default=None, serialization_alias="firstName")
    last_name: Optional[str] = Field(default=None, serialization_alias="lastName")
    email: Optional[str] = None
    phone: Optional[str] = None


class ProviderCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("firstName", "first_name"))
    last_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("lastName", "last_name"))
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    business_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("businessId", "business_id"))
    provider_type: Optional[str] = Field(default=None, validation_alias=AliasChoices("providerType", "provider_type"))
    send_email_notification: bool = Field(
        default=False, validation_alias=AliasChoices("sendEmailNotification", "send_email_notification")
    )

    def missing_required(self) -> bool:
        return not all(
            (self.first_name, self.last_name, self.email, self.phone, self.address, self.business_id)
        )
