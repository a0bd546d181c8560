"""
Booking Lifecycle - status state machine and cancellation policy

States:
- pending   → waiting for host/payment confirmation
- confirmed → active reservation
- cancelled → terminal, nothing moves out of it

Allowed moves:
- pending   --confirm--> confirmed
- pending   --cancel-->  cancelled
- confirmed --cancel-->  cancelled

Cancellation policy: a cancellation requested at least 24 hours before
pickup is eligible for a full refund, anything later for 50 %.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from app.db.errors import TransitionError
from app.db.formatUtils import toNaiveUtc, utcNow, DateLike

logger = logging.getLogger(__name__)

PENDING = "pending"
CONFIRMED = "confirmed"
CANCELLED = "cancelled"

BOOKING_STATUSES = (PENDING, CONFIRMED, CANCELLED)

CONFIRM = "confirm"
CANCEL = "cancel"

TRANSITIONS = {
    (PENDING, CONFIRM): CONFIRMED,
    (PENDING, CANCEL): CANCELLED,
    (CONFIRMED, CANCEL): CANCELLED,
}

FREE_CANCELLATION_WINDOW = timedelta(hours=24)
FULL_REFUND_PERCENT = 100
LATE_REFUND_PERCENT = 50


@dataclass(frozen=True)
class CancellationQuote:
    hoursBeforePickup: float
    fullRefund: bool
    refundPercent: int


def initialBookingStatus(autoConfirm: bool) -> str:
    return CONFIRMED if autoConfirm else PENDING


def evaluateCancellation(startDate: DateLike, now: Optional[datetime] = None) -> CancellationQuote:
    startDate = toNaiveUtc(startDate)
    now = toNaiveUtc(now) if now is not None else utcNow()

    lead = startDate - now
    fullRefund = lead >= FREE_CANCELLATION_WINDOW
    return CancellationQuote(
        hoursBeforePickup=round(lead.total_seconds() / 3600, 2),
        fullRefund=fullRefund,
        refundPercent=FULL_REFUND_PERCENT if fullRefund else LATE_REFUND_PERCENT,
    )


def canTransition(status: str, action: str) -> bool:
    return (status, action) in TRANSITIONS


def transitionBookingStatus(booking, action: str, now: Optional[datetime] = None) -> dict:
    """
    Apply `action` to the booking's current status.

    Returns the patch to persist (column name → value). Raises
    TransitionError for any move not in TRANSITIONS, including a second
    cancellation of an already cancelled booking.
    """
    current = booking.status
    target = TRANSITIONS.get((current, action))

    if target is None:
        if current == CANCELLED:
            raise TransitionError(f"Booking {booking.id} is already cancelled")
        if action not in (CONFIRM, CANCEL):
            raise TransitionError(f"Unknown booking action: {action}")
        raise TransitionError(f"Cannot {action} a booking that is {current}")

    patch = {"status": target}

    if action == CANCEL:
        now = toNaiveUtc(now) if now is not None else utcNow()
        quote = evaluateCancellation(booking.start_date, now)
        patch["cancelled_at"] = now
        patch["refund_percent"] = quote.refundPercent

    logger.info("Booking %s: %s -> %s", booking.id, current, target)
    return patch
