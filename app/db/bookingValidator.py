"""
Booking Request Validator

Turns raw booking form input into a well-formed record ready to persist,
or rejects it. The persisted total is always recomputed here from the
car's daily rate; a client-supplied total is never trusted.
"""
import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional

from app.db.bookingLifecycle import initialBookingStatus
from app.db.errors import ValidationError, VerificationRequiredError, NotAuthenticatedError
from app.db.formatUtils import toNaiveUtc, utcNow
from app.db.pricingEngine import computeBookingPrice, PriceBreakdown

logger = logging.getLogger(__name__)

PAYMENT_METHODS = ("card", "airtel", "paypal")


@dataclass
class BookingRecord:
    car_id: int
    user_id: int
    start_date: datetime
    end_date: datetime
    pickup_location: str
    dropoff_location: str
    total_amount: int
    currency: str
    payment_method: str
    status: str
    price: PriceBreakdown

    def toRow(self) -> dict:
        row = asdict(self)
        row.pop("price")
        return row


def _parseDate(value, field: str) -> datetime:
    if value is None or value == "":
        raise ValidationError(f"{field} is required", field=field)
    try:
        return toNaiveUtc(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} is not a valid date", field=field)


def validateBookingRequest(
    request,
    car,
    user,
    now: Optional[datetime] = None,
    requireVerification: bool = True,
    autoConfirm: bool = True,
) -> BookingRecord:
    """
    Validate a booking request for `car` made by `user`.

    Raises:
    - NotAuthenticatedError if there is no acting user
    - VerificationRequiredError if verification is required and missing
    - ValidationError for bad dates, locations or payment method
    """
    if user is None:
        raise NotAuthenticatedError()

    # Checked before field validation so the client can redirect first
    if requireVerification and not user.isVerified:
        raise VerificationRequiredError()

    if not car.available:
        raise ValidationError("This car is not available for booking", field="carId")

    startDate = _parseDate(request.startDate, "startDate")
    endDate = _parseDate(request.endDate, "endDate")

    now = toNaiveUtc(now) if now is not None else utcNow()
    todayMidnight = now.replace(hour=0, minute=0, second=0, microsecond=0)

    if startDate < todayMidnight:
        raise ValidationError("Start date cannot be in the past", field="startDate")

    if endDate <= startDate:
        raise ValidationError("End date must be after start date", field="endDate")

    paymentMethod = (request.paymentMethod or "").strip()
    if paymentMethod not in PAYMENT_METHODS:
        raise ValidationError(
            f"Payment method must be one of: {', '.join(PAYMENT_METHODS)}",
            field="paymentMethod",
        )

    pickupLocation = (request.pickupLocation or "").strip() or (car.location or "").strip()
    if not pickupLocation:
        raise ValidationError("Pickup location is required", field="pickupLocation")

    if request.differentDropoff:
        dropoffLocation = (request.dropoffLocation or "").strip()
        if not dropoffLocation:
            raise ValidationError("Drop-off location is required", field="dropoffLocation")
    else:
        dropoffLocation = pickupLocation

    price = computeBookingPrice(car.daily_rate, startDate, endDate)

    clientTotal = getattr(request, "totalAmount", None)
    if clientTotal is not None and clientTotal != price.total:
        logger.warning(
            "Ignoring client total %s for car %s, recomputed %s",
            clientTotal, car.id, price.total,
        )

    return BookingRecord(
        car_id=car.id,
        user_id=user.id,
        start_date=startDate,
        end_date=endDate,
        pickup_location=pickupLocation,
        dropoff_location=dropoffLocation,
        total_amount=price.total,
        currency=car.currency,
        payment_method=paymentMethod,
        status=initialBookingStatus(autoConfirm),
        price=price,
    )
