from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class AdminNotificationRead(BaseModel):
    id: int
    title: str
    description: str = ""
    read: bool = False
    link: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
