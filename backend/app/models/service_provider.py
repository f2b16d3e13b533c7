from sqlalchemy import Boolean, Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import BaseModel, new_id


def provider_display_name(name: str | None, first_name: str | None, last_name: str | None) -> str:
    """Prefer an explicit name, else ``first last`` trimmed."""
    if name:
        return name
    return f"{first_name or ''} {last_name or ''}".strip()


class ServiceProvider(BaseModel):
    __tablename__ = "service_providers"
    __table_args__ = (
        UniqueConstraint("business_id", "email", name="uq_service_providers_business_email"),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    provider_type = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")
    send_email_notification = Column(Boolean, default=False, nullable=False)

    bookings = relationship("Booking", back_populates="provider")

    @property
    def display_name(self) -> str:
        return provider_display_name(self.name, self.first_name, self.last_name)
