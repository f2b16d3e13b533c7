"""In-memory bookings board for one business.

The board is what the admin console works against: one fetch of every
booking for the business (newest date first) annotated with provider
names, a selected booking, and the two mutations an admin performs from
the list. Mutations write to the database first and only touch the
in-memory records once the commit succeeded.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.config import settings
from ..crud import crud_booking, crud_notification, crud_service_provider
from ..models.booking_status import (
    CLOSED_STATUSES,
    BookingStatus,
    can_transition,
    status_after_assignment,
)
from ..models.service_provider import provider_display_name
from ..schemas.booking import BookingRead
from ..schemas.calendar import CalendarMonth
from ..schemas.provider import ProviderRead
from . import booking_tabs, calendar_service
from .booking_tabs import BookingTab

logger = logging.getLogger(__name__)


class BookingNotFound(LookupError):
    pass


class BookingFetchError(RuntimeError):
    pass


class BookingUpdateError(RuntimeError):
    """A write was rejected by the database; local state is untouched."""


class InvalidStatusTransition(ValueError):
    def __init__(self, current: BookingStatus, target: BookingStatus) -> None:
        super().__init__(
            f"Cannot change booking status from {current.value} to {target.value}: "
            "console policy keeps completed and cancelled bookings out of draft and quote"
        )
        self.current = current
        self.target = target


class AssignmentNotAllowed(ValueError):
    pass


def booking_reference(booking_id: str) -> str:
    """Short human reference shown in notifications, e.g. ``BK3F9A1C``."""
    return f"BK{booking_id[-6:].upper()}"


def provider_to_read(provider: Any) -> ProviderRead:
    return ProviderRead(
        id=str(provider.id),
        name=provider_display_name(provider.name, provider.first_name, provider.last_name),
        first_name=provider.first_name,
        last_name=provider.last_name,
        email=provider.email,
        phone=provider.phone,
    )


class BookingBoard:
    def __init__(
        self,
        db: Session,
        business_id: Optional[str],
        allow_closed_assignment: Optional[bool] = None,
    ) -> None:
        self.db = db
        self.business_id = business_id
        self.bookings: list[BookingRead] = []
        self.providers: list[ProviderRead] = []
        self.selected_id: Optional[str] = None
        self.assignment_open = False
        if allow_closed_assignment is None:
            allow_closed_assignment = settings.ALLOW_ASSIGNMENT_ON_CLOSED_BOOKINGS
        self.allow_closed_assignment = allow_closed_assignment

    @property
    def ready(self) -> bool:
        return bool(self.business_id)

    # Loading

    def load(self) -> list[BookingRead]:
        """Fetch the business's bookings and resolve provider names.

        Without a business id the board is not ready: nothing is fetched and
        no error is raised. A failed fetch leaves the previous list in place.
        """
        if not self.ready:
            logger.debug("Booking board not ready, no business id")
            return self.bookings
        try:
            rows = crud_booking.get_bookings_for_business(self.db, self.business_id)
            provider_ids = {row.provider_id for row in rows if row.provider_id}
            providers = crud_service_provider.get_providers_by_ids(self.db, provider_ids)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Failed to fetch bookings for business %s: %s", self.business_id, exc)
            raise BookingFetchError(f"Failed to fetch bookings: {exc}") from exc

        names = {p.id: p.display_name for p in providers}
        records = []
        for row in rows:
            record = BookingRead.model_validate(row)
            if record.provider_id in names:
                record = record.model_copy(update={"assigned_provider": names[record.provider_id]})
            records.append(record)
        self.bookings = records
        logger.debug("Loaded %d bookings for business %s", len(records), self.business_id)
        return self.bookings

    def switch_business(self, business_id: Optional[str]) -> list[BookingRead]:
        """Clear everything, then load the new business's bookings."""
        self.business_id = business_id
        self.bookings = []
        self.providers = []
        self.selected_id = None
        self.assignment_open = False
        return self.load()

    def load_providers(self) -> list[ProviderRead]:
        if not self.ready:
            return self.providers
        rows = crud_service_provider.get_providers_for_business(self.db, self.business_id)
        self.providers = [provider_to_read(p) for p in rows]
        return self.providers

    # Selection

    def get(self, booking_id: str) -> BookingRead:
        for booking in self.bookings:
            if booking.id == booking_id:
                return booking
        raise BookingNotFound(f"Booking {booking_id} not found")

    def select(self, booking_id: Optional[str]) -> Optional[BookingRead]:
        if booking_id is None:
            self.selected_id = None
            return None
        booking = self.get(booking_id)
        self.selected_id = booking.id
        return booking

    @property
    def selected(self) -> Optional[BookingRead]:
        if self.selected_id is None:
            return None
        try:
            return self.get(self.selected_id)
        except BookingNotFound:
            return None

    def open_assignment(self, booking_id: str) -> BookingRead:
        booking = self.select(booking_id)
        self.assignment_open = True
        return booking

    # Views

    def bucket(self, tab: BookingTab, today: date) -> list[BookingRead]:
        return booking_tabs.bucket(self.bookings, tab, today)

    def counts(self, today: date) -> dict[str, int]:
        return booking_tabs.bucket_counts(self.bookings, today)

    def visible(
        self,
        tab: BookingTab,
        today: date,
        search: Optional[str] = None,
        status: Optional[str] = None,
        frequency: Optional[str] = None,
    ) -> list[BookingRead]:
        return booking_tabs.visible_bookings(self.bookings, tab, today, search, status, frequency)

    def calendar(self, year: int, month: int, today: date) -> CalendarMonth:
        return calendar_service.project_month(self.bookings, year, month, today)

    # Mutations

    def _replace(self, booking_id: str, **changes) -> BookingRead:
        for index, booking in enumerate(self.bookings):
            if booking.id == booking_id:
                updated = booking.model_copy(update=changes)
                self.bookings[index] = updated
                return updated
        raise BookingNotFound(f"Booking {booking_id} not found")

    def _notify(self, title: str, description: str) -> None:
        try:
            crud_notification.create_admin_notification(
                self.db, self.business_id, title, description, link="/admin/bookings"
            )
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning("Could not record admin notification %r: %s", title, exc)

    def change_status(self, booking_id: str, status: BookingStatus | str) -> BookingRead:
        try:
            target = BookingStatus(status)
        except ValueError:
            raise ValueError(f"Unknown booking status: {status}") from None
        current = self.get(booking_id)
        if not can_transition(current.status, target):
            raise InvalidStatusTransition(current.status, target)

        db_booking = crud_booking.get_booking(self.db, self.business_id, booking_id)
        if db_booking is None:
            raise BookingNotFound(f"Booking {booking_id} not found")
        try:
            crud_booking.update_booking_fields(self.db, db_booking, status=target)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Status update failed for booking %s: %s", booking_id, exc)
            raise BookingUpdateError(f"Failed to update booking status: {exc}") from exc

        updated = self._replace(booking_id, status=target)
        self._notify(
            "Booking modified",
            f"Booking {booking_reference(booking_id)} status changed to {target.value}.",
        )
        return updated

    def assign_provider(self, provider: Any) -> BookingRead:
        """Assign ``provider`` to the selected booking.

        ``provider`` is anything with ``id``, ``name``, ``first_name`` and
        ``last_name``. The booking's status follows
        :func:`status_after_assignment`.
        """
        booking = self.selected
        if booking is None:
            raise BookingNotFound("No booking selected")
        if not self.allow_closed_assignment and booking.status in CLOSED_STATUSES:
            raise AssignmentNotAllowed(
                f"Cannot assign a provider to a {booking.status.value} booking"
            )
        name = provider_display_name(
            getattr(provider, "name", None),
            getattr(provider, "first_name", None),
            getattr(provider, "last_name", None),
        )
        provider_id = str(provider.id)
        new_status = status_after_assignment(booking.status)

        db_booking = crud_booking.get_booking(self.db, self.business_id, booking.id)
        if db_booking is None:
            raise BookingNotFound(f"Booking {booking.id} not found")
        try:
            crud_booking.update_booking_fields(
                self.db,
                db_booking,
                provider_id=provider_id,
                assigned_provider=name,
                status=new_status,
            )
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Provider assignment failed for booking %s: %s", booking.id, exc)
            raise BookingUpdateError(f"Failed to assign provider: {exc}") from exc

        updated = self._replace(
            booking.id,
            provider_id=provider_id,
            assigned_provider=name,
            status=new_status,
        )
        self.assignment_open = False
        self._notify(
            "Booking assigned",
            f"Provider {name} assigned to booking {booking_reference(booking.id)}.",
        )
        return updated
