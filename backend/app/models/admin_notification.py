from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text

from .base import BaseModel


class AdminNotification(BaseModel):
    __tablename__ = "admin_notifications"

    id = Column(Integer, primary_key=True, index=True)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    link = Column(String, nullable=True)
    read = Column(Boolean, default=False, nullable=False)
