"""Bucket bookings into the console's tabs and apply the search filters.

Everything here is pure: callers pass ``today`` in, nothing reads the clock.
Buckets overlap on purpose, a pending booking dated today shows under both
*Today* and *Unassigned* (and under *All*).
"""

from __future__ import annotations

import enum
from datetime import date
from typing import Iterable, Optional, Sequence

from ..models.booking_status import ACTIVE_STATUSES, DRAFT_STATUSES, BookingStatus
from ..schemas.booking import BookingRead


class BookingTab(str, enum.Enum):
    ALL = "all"
    TODAY = "today"
    UPCOMING = "upcoming"
    UNASSIGNED = "unassigned"
    DRAFT = "draft"
    CANCELLED = "cancelled"
    HISTORY = "history"


ALL_FILTER = "all"
_ONE_TIME_VALUES = ("", "one-time", "onetime")


def _iso(today: date | str) -> str:
    return today if isinstance(today, str) else today.isoformat()


def _is_unassigned(booking: BookingRead) -> bool:
    return not booking.provider_id and not booking.assigned_provider


def in_tab(booking: BookingRead, tab: BookingTab, today: date | str) -> bool:
    today_iso = _iso(today)
    tab = BookingTab(tab)
    if tab is BookingTab.ALL:
        return True
    if tab is BookingTab.TODAY:
        return booking.date == today_iso
    if tab is BookingTab.UPCOMING:
        return booking.date > today_iso and booking.status in ACTIVE_STATUSES
    if tab is BookingTab.UNASSIGNED:
        return _is_unassigned(booking) and booking.status in ACTIVE_STATUSES
    if tab is BookingTab.DRAFT:
        return booking.status in DRAFT_STATUSES
    if tab is BookingTab.CANCELLED:
        return booking.status == BookingStatus.CANCELLED
    # History: anything in the past, plus completed jobs with a future date.
    return booking.date < today_iso or booking.status == BookingStatus.COMPLETED


def bucket(bookings: Iterable[BookingRead], tab: BookingTab, today: date | str) -> list[BookingRead]:
    """Return the bookings shown under ``tab``, in source order."""
    return [b for b in bookings if in_tab(b, tab, today)]


def bucket_counts(bookings: Sequence[BookingRead], today: date | str) -> dict[str, int]:
    return {tab.value: len(bucket(bookings, tab, today)) for tab in BookingTab}


def _matches_search(booking: BookingRead, query: str) -> bool:
    return (
        query in booking.id.lower()
        or query in (booking.customer_name or "").lower()
        or query in (booking.service or "").lower()
    )


def _matches_frequency(booking: BookingRead, frequency: str) -> bool:
    value = (booking.frequency or "").strip().lower()
    wanted = frequency.strip().lower()
    if wanted in ("one-time", "onetime"):
        return value in _ONE_TIME_VALUES
    return wanted in value


def filter_bookings(
    bookings: Iterable[BookingRead],
    search: Optional[str] = None,
    status: Optional[str] = None,
    frequency: Optional[str] = None,
) -> list[BookingRead]:
    """Apply the free-text, status and frequency filters (ANDed).

    ``"all"`` or an empty value disables the status and frequency filters.
    """
    query = (search or "").strip().lower()
    status_filter = (status or ALL_FILTER).strip().lower()
    frequency_filter = (frequency or ALL_FILTER).strip().lower()

    result = []
    for booking in bookings:
        if query and not _matches_search(booking, query):
            continue
        if status_filter != ALL_FILTER and booking.status.value != status_filter:
            continue
        if frequency_filter != ALL_FILTER and not _matches_frequency(booking, frequency_filter):
            continue
        result.append(booking)
    return result


def visible_bookings(
    bookings: Iterable[BookingRead],
    tab: BookingTab,
    today: date | str,
    search: Optional[str] = None,
    status: Optional[str] = None,
    frequency: Optional[str] = None,
) -> list[BookingRead]:
    return filter_bookings(bucket(bookings, tab, today), search, status, frequency)
