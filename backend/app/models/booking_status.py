import enum


class BookingStatus(str, enum.Enum):
    """Closed set of states a booking can be in."""
    DRAFT = "draft"
    QUOTE = "quote"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


ACTIVE_STATUSES = frozenset({BookingStatus.CONFIRMED, BookingStatus.PENDING})
DRAFT_STATUSES = frozenset({BookingStatus.DRAFT, BookingStatus.QUOTE})
CLOSED_STATUSES = frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED})

_S = BookingStatus

# Legal status changes, keyed by current status. A finished or cancelled job
# can be reopened or corrected but never goes back to being a draft/quote.
STATUS_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    _S.DRAFT: frozenset({_S.DRAFT, _S.QUOTE, _S.PENDING, _S.CONFIRMED, _S.COMPLETED, _S.CANCELLED}),
    _S.QUOTE: frozenset({_S.DRAFT, _S.QUOTE, _S.PENDING, _S.CONFIRMED, _S.COMPLETED, _S.CANCELLED}),
    _S.PENDING: frozenset({_S.DRAFT, _S.QUOTE, _S.PENDING, _S.CONFIRMED, _S.COMPLETED, _S.CANCELLED}),
    _S.CONFIRMED: frozenset({_S.DRAFT, _S.QUOTE, _S.PENDING, _S.CONFIRMED, _S.COMPLETED, _S.CANCELLED}),
    _S.COMPLETED: frozenset({_S.PENDING, _S.CONFIRMED, _S.COMPLETED, _S.CANCELLED}),
    _S.CANCELLED: frozenset({_S.PENDING, _S.CONFIRMED, _S.COMPLETED, _S.CANCELLED}),
}


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return target in STATUS_TRANSITIONS.get(BookingStatus(current), frozenset())


def status_after_assignment(current: BookingStatus) -> BookingStatus:
    """Assigning a provider confirms the booking, whatever its prior status."""
    return BookingStatus.CONFIRMED
