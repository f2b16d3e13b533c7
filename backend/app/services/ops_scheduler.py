from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..core.config import settings
from ..crud import crud_booking, crud_business
from ..database import get_db_session
from ..models.base import utcnow
from ..models.booking_status import BookingStatus
from .calendar_service import booking_start

logger = logging.getLogger(__name__)


def booking_end_time(booking: models.Booking, default_minutes: Optional[int] = None) -> Optional[datetime]:
    """Start (``date`` plus the clock time in ``time``) plus the job length.

    ``None`` when the booking has no usable date or time.
    """
    start = booking_start(booking.date, booking.time)
    if start is None:
        return None
    if booking.duration_minutes is not None:
        minutes = booking.duration_minutes
    else:
        minutes = default_minutes if default_minutes is not None else settings.DEFAULT_JOB_LENGTH_MINUTES
    return start + timedelta(minutes=minutes)


def handle_auto_completion(db: Session, now: Optional[datetime] = None) -> dict:
    """Mark finished confirmed bookings completed for businesses on automatic mode."""
    now = now or utcnow()
    business_ids = crud_business.get_automatic_completion_business_ids(db)
    if not business_ids:
        return {"completed": 0, "message": "No businesses with automatic completion"}

    completed = 0
    for booking in crud_booking.get_confirmed_bookings(db, business_ids):
        end = booking_end_time(booking)
        if end is None or end > now:
            continue
        try:
            crud_booking.update_booking_fields(db, booking, status=BookingStatus.COMPLETED)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.warning("Auto-complete failed for booking %s: %s", booking.id, exc)
            continue
        completed += 1
    if completed:
        logger.info("Auto-completed %d bookings", completed)
    return {"completed": completed}


def run_maintenance() -> dict:
    """Run the scheduled jobs once with a short-lived session."""
    with get_db_session() as db:
        return handle_auto_completion(db)
