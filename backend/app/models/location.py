from sqlalchemy import Boolean, Column, Float, ForeignKey, String

from .base import BaseModel, new_id


class Location(BaseModel):
    __tablename__ = "locations"

    id = Column(String(32), primary_key=True, default=new_id)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    postal_code = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    address = Column(String, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
