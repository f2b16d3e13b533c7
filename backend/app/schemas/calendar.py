from pydantic import BaseModel

from .booking import BookingRead


class CalendarCell(BaseModel):
    day: int
    date: str
    bookings: list[BookingRead]
    visible: list[BookingRead]
    overflow: int = 0
    is_today: bool = False


class CalendarMonth(BaseModel):
    year: int
    # Zero-based, January is 0.
    month: int
    label: str = ""
    days_in_month: int
    leading_blanks: int
    days: list[CalendarCell]
