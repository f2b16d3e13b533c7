# backend/app/api/api_booking.py

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ..crud import crud_service_provider
from ..database import get_db
from ..schemas.booking import (
    BookingListResponse,
    BookingRead,
    BookingStatusUpdate,
    ProviderAssignment,
)
from ..schemas.calendar import CalendarMonth
from ..services import calendar_service
from ..services.booking_board import (
    AssignmentNotAllowed,
    BookingBoard,
    BookingNotFound,
    BookingUpdateError,
    InvalidStatusTransition,
)
from ..services.booking_tabs import BookingTab
from ..utils.errors import error_response
from .dependencies import get_booking_board, get_today

router = APIRouter(tags=["bookings"])
logger = logging.getLogger(__name__)
# main.py mounts this at f"{API_V1_STR}/admin/bookings".


@router.get("/", response_model=BookingListResponse)
def list_bookings(
    tab: BookingTab = Query(BookingTab.ALL),
    search: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    frequency: str | None = Query(None),
    board: BookingBoard = Depends(get_booking_board),
    today: date = Depends(get_today),
):
    """Bookings under one tab, filtered, plus the count for every tab."""
    visible = board.visible(tab, today, search=search, status=status_filter, frequency=frequency)
    return {
        "tab": tab.value,
        "total": len(visible),
        "counts": board.counts(today),
        "bookings": visible,
    }


@router.get("/calendar", response_model=CalendarMonth)
def get_calendar_month(
    year: int | None = Query(None, ge=1, le=9999),
    month: int | None = Query(None, ge=0, le=11, description="Zero-based month, January is 0"),
    board: BookingBoard = Depends(get_booking_board),
    today: date = Depends(get_today),
):
    year = today.year if year is None else year
    month = today.month - 1 if month is None else month
    return board.calendar(year, month, today)


@router.get("/calendar.ics")
def download_calendar_month(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=0, le=11),
    board: BookingBoard = Depends(get_booking_board),
):
    """Return the month's bookings as an ICS file."""
    body = calendar_service.month_to_ics(board.bookings, year, month)
    filename = f"bookings-{year:04d}-{month + 1:02d}.ics"
    headers = {"Content-Disposition": f"attachment; filename={filename}"}
    return Response(body, media_type="text/calendar", headers=headers)


@router.get("/{booking_id}", response_model=BookingRead)
def get_booking(booking_id: str, board: BookingBoard = Depends(get_booking_board)):
    try:
        return board.select(booking_id)
    except BookingNotFound:
        raise error_response("Booking not found", {"booking_id": "not_found"}, status.HTTP_404_NOT_FOUND)


@router.patch("/{booking_id}/status", response_model=BookingRead)
def update_booking_status(
    booking_id: str,
    payload: BookingStatusUpdate,
    board: BookingBoard = Depends(get_booking_board),
):
    try:
        board.select(booking_id)
        return board.change_status(booking_id, payload.status)
    except BookingNotFound:
        raise error_response("Booking not found", {"booking_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    except InvalidStatusTransition as exc:
        raise error_response(str(exc), {"status": "invalid_transition"}, status.HTTP_409_CONFLICT)
    except BookingUpdateError as exc:
        raise error_response(str(exc), {}, status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("/{booking_id}/assign-provider", response_model=BookingRead)
def assign_provider(
    booking_id: str,
    payload: ProviderAssignment,
    board: BookingBoard = Depends(get_booking_board),
    db: Session = Depends(get_db),
):
    try:
        board.open_assignment(booking_id)
    except BookingNotFound:
        raise error_response("Booking not found", {"booking_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    provider = crud_service_provider.get_provider(db, board.business_id, payload.provider_id)
    if provider is None:
        raise error_response("Provider not found", {"provider_id": "not_found"}, status.HTTP_404_NOT_FOUND)
    try:
        return board.assign_provider(provider)
    except AssignmentNotAllowed as exc:
        raise error_response(str(exc), {"status": "closed"}, status.HTTP_409_CONFLICT)
    except BookingUpdateError as exc:
        raise error_response(str(exc), {}, status.HTTP_500_INTERNAL_SERVER_ERROR)
