import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime

from ..database import Base  # This is the same Base created by declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    """Opaque string identifier assigned by the store on insert."""
    return uuid.uuid4().hex


class BaseModel(Base):
    __abstract__ = True

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


def new_uuid() -> str:
    """Dashed UUID, for tables whose ids are validated as UUIDs by clients."""
    return str(uuid.uuid4())
