from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from .. import models
from ..models.booking_status import BookingStatus


def get_bookings_for_business(db: Session, business_id: str) -> List[models.Booking]:
    """All bookings for a business, newest date first."""
    return (
        db.query(models.Booking)
        .filter(models.Booking.business_id == business_id)
        .order_by(models.Booking.date.desc())
        .all()
    )


def get_booking(db: Session, business_id: str, booking_id: str) -> Optional[models.Booking]:
    return (
        db.query(models.Booking)
        .filter(models.Booking.id == booking_id, models.Booking.business_id == business_id)
        .first()
    )


def update_booking_fields(db: Session, db_booking: models.Booking, **fields) -> models.Booking:
    """Write ``fields`` to one booking and commit.

    Raises whatever SQLAlchemy raises; the caller decides how to roll back.
    """
    for key, value in fields.items():
        setattr(db_booking, key, value)
    db.commit()
    db.refresh(db_booking)
    return db_booking


def get_confirmed_bookings(db: Session, business_ids: Iterable[str]) -> List[models.Booking]:
    ids = list(business_ids)
    if not ids:
        return []
    return (
        db.query(models.Booking)
        .filter(
            models.Booking.business_id.in_(ids),
            models.Booking.status == BookingStatus.CONFIRMED,
        )
        .all()
    )
