import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.ops_scheduler import handle_auto_completion
from .dependencies import verify_cron_secret

router = APIRouter(tags=["ops"])
logger = logging.getLogger(__name__)


@router.api_route(
    "/auto-complete-bookings",
    methods=["GET", "POST"],
    dependencies=[Depends(verify_cron_secret)],
)
def auto_complete_bookings(db: Session = Depends(get_db)):
    """Complete confirmed bookings whose job has ended (automatic mode only)."""
    summary = handle_auto_completion(db)
    logger.info("Auto-complete run: %s", summary)
    return summary
