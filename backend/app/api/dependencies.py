from datetime import date, datetime, timezone
from typing import Optional

from fastapi import Depends, Header, Query, Request, status
from sqlalchemy.orm import Session

from ..core.config import settings
from ..database import get_db
from ..services.booking_board import BookingBoard, BookingFetchError
from ..utils.errors import api_error, error_response


def get_business_id(
    business_id: Optional[str] = Query(None, alias="businessId"),
    x_business_id: Optional[str] = Header(None, alias="x-business-id"),
) -> Optional[str]:
    """Tenant for the request: ``?businessId=`` wins over ``x-business-id``."""
    value = (business_id or x_business_id or "").strip()
    return value or None


def require_business_id(business_id: Optional[str] = Depends(get_business_id)) -> str:
    if not business_id:
        raise error_response(
            "Business ID is required",
            {"businessId": "required"},
            status.HTTP_400_BAD_REQUEST,
        )
    return business_id


def get_today() -> date:
    """Calendar day used for tab bucketing and the calendar's today marker."""
    return datetime.now(timezone.utc).date()


def get_booking_board(
    db: Session = Depends(get_db),
    business_id: str = Depends(require_business_id),
) -> BookingBoard:
    board = BookingBoard(db, business_id)
    try:
        board.load()
    except BookingFetchError as exc:
        raise error_response(str(exc), {}, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return board


def verify_cron_secret(request: Request) -> None:
    """Require ``Authorization: Bearer <CRON_SECRET>`` when a secret is configured."""
    secret = settings.CRON_SECRET
    if not secret:
        return
    if request.headers.get("authorization") != f"Bearer {secret}":
        raise api_error("Unauthorized", status.HTTP_401_UNAUTHORIZED)
