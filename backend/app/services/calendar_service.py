"""Month grid projection of bookings and iCalendar export."""

from __future__ import annotations

import calendar as _calendar
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence
import logging

from ics import Calendar, Event

from ..core.config import settings
from ..schemas.booking import BookingRead
from ..schemas.calendar import CalendarCell, CalendarMonth

logger = logging.getLogger(__name__)


def month_layout(year: int, month: int) -> tuple[int, int]:
    """Return ``(days_in_month, leading_blanks)`` for a zero-based month.

    Leading blanks count the empty cells before day 1 in a Sunday-first week.
    """
    # ``monthrange`` stays valid for December of year 9999.
    first_weekday, days_in_month = _calendar.monthrange(year, month + 1)
    # ``first_weekday`` is Monday=0; shift so Sunday=0.
    leading_blanks = (first_weekday + 1) % 7
    return days_in_month, leading_blanks


def format_cell_date(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month + 1:02d}-{day:02d}"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move ``delta`` months from a zero-based ``(year, month)``."""
    index = year * 12 + month + delta
    return index // 12, index % 12


def project_month(
    bookings: Sequence[BookingRead],
    year: int,
    month: int,
    today: date,
    cell_limit: Optional[int] = None,
) -> CalendarMonth:
    limit = settings.CALENDAR_CELL_LIMIT if cell_limit is None else cell_limit
    days_in_month, leading_blanks = month_layout(year, month)
    by_date: dict[str, list[BookingRead]] = {}
    for booking in bookings:
        by_date.setdefault(booking.date, []).append(booking)

    cells = []
    for day in range(1, days_in_month + 1):
        cell_date = format_cell_date(year, month, day)
        matching = by_date.get(cell_date, [])
        cells.append(
            CalendarCell(
                day=day,
                date=cell_date,
                bookings=matching,
                visible=matching[:limit],
                overflow=max(len(matching) - limit, 0),
                is_today=(today.year == year and today.month == month + 1 and today.day == day),
            )
        )
    return CalendarMonth(
        year=year,
        month=month,
        label=f"{month_name(month)} {year}",
        days_in_month=days_in_month,
        leading_blanks=leading_blanks,
        days=cells,
    )


_TIME_FORMATS = ("%I:%M %p", "%I:%M%p", "%H:%M")


def booking_start(date_text: str, time_text: Optional[str]) -> Optional[datetime]:
    """Start of a timed booking; ``None`` when ``time_text`` isn't a clock time.

    Accepts ``02:30 PM`` / ``2:30pm`` as well as 24-hour ``14:30``. Anything
    after the clock time (``14:30:00``, ``09:00 - 11:00``) is ignored.
    """
    time_text = (time_text or "").strip().upper()
    if not time_text:
        return None
    try:
        day = datetime.strptime(date_text or "", "%Y-%m-%d")
    except ValueError:
        return None
    candidates = [time_text, time_text[:8], time_text[:7], time_text[:5]]
    for fmt in _TIME_FORMATS:
        for text in candidates:
            try:
                clock = datetime.strptime(text.strip(), fmt)
            except ValueError:
                continue
            return day.replace(hour=clock.hour, minute=clock.minute)
    return None


def month_to_ics(bookings: Iterable[BookingRead], year: int, month: int) -> str:
    """Serialize the month's bookings as an iCalendar document.

    Bookings with a parseable clock time become timed events, the rest
    all-day events.
    """
    prefix = format_cell_date(year, month, 1)[:7]
    cal = Calendar()
    for booking in bookings:
        if not booking.date.startswith(prefix):
            continue
        event = Event()
        event.name = f"{booking.service or 'Booking'} - {booking.customer_name}".strip(" -")
        event.uid = f"{booking.id}@bookings-console"
        start = booking_start(booking.date, booking.time)
        if start is None:
            try:
                event.begin = datetime.strptime(booking.date, "%Y-%m-%d")
            except ValueError:
                logger.warning("Skipping booking %s with bad date %r", booking.id, booking.date)
                continue
            event.make_all_day()
        else:
            event.begin = start
            event.duration = timedelta(
                minutes=booking.duration_minutes or settings.DEFAULT_JOB_LENGTH_MINUTES
            )
        if booking.address:
            event.location = booking.address
        event.description = f"Status: {booking.status.value}"
        cal.events.add(event)
    return cal.serialize()


def month_name(month: int) -> str:
    return _calendar.month_name[month + 1]
