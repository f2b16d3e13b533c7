import logging
from sqlalchemy import event
from sqlalchemy.orm.attributes import NO_VALUE

from .. import models

logger = logging.getLogger(__name__)

_registered = False


def _status_value(value):
    return getattr(value, "value", value)


def _booking_status_change(target, value, oldvalue, initiator):  # noqa: ANN001
    if oldvalue is NO_VALUE or oldvalue is None:
        return
    old, new = _status_value(oldvalue), _status_value(value)
    if old == new:
        return
    logger.info(
        "Booking id=%s status changed from %s to %s",
        getattr(target, "id", "unknown"),
        old,
        new,
        extra={"business_id": getattr(target, "business_id", None)},
    )


def register_status_listeners() -> None:
    """Log every in-session change of ``Booking.status``. Idempotent."""
    global _registered
    if _registered:
        return
    event.listen(models.Booking.status, "set", _booking_status_change, active_history=True, propagate=True)
    _registered = True
