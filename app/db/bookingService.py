"""
Booking service - runs the booking core against the storage gateway.

Each operation is a single request/response unit: validate, then one
write through the gateway. If the write fails the whole operation fails
with PersistenceError; nothing is compensated.
"""
import logging
from datetime import datetime
from typing import List, Optional

from app.db.bookingLifecycle import (
    CANCEL,
    CONFIRM,
    CANCELLED,
    FULL_REFUND_PERCENT,
    CancellationQuote,
    evaluateCancellation,
    transitionBookingStatus,
)
from app.db.bookingValidator import validateBookingRequest
from app.db.errors import ForbiddenError, NotFoundError, ValidationError
from app.db.formatUtils import toNaiveUtc
from app.db.pricingEngine import PriceBreakdown, computeBookingPrice

logger = logging.getLogger(__name__)


def _requireCar(gateway, carId: int):
    car = gateway.getCar(carId)
    if not car:
        raise NotFoundError("Car not found")
    return car


def _requireBooking(gateway, bookingId: int):
    booking = gateway.getBooking(bookingId)
    if not booking:
        raise NotFoundError("Booking not found")
    return booking


def quoteBooking(gateway, carId: int, startDate, endDate) -> PriceBreakdown:
    car = _requireCar(gateway, carId)
    return computeBookingPrice(car.daily_rate, startDate, endDate)


def createBooking(gateway, user, request, settings, now: Optional[datetime] = None):
    car = _requireCar(gateway, request.carId)

    record = validateBookingRequest(
        request,
        car,
        user,
        now=now,
        requireVerification=settings.requireIdVerification,
        autoConfirm=settings.bookingAutoConfirm,
    )

    if car.host_id == user.id:
        raise ValidationError("You cannot book your own car", field="carId")

    if gateway.getOverlappingBookings(car.id, record.start_date, record.end_date):
        raise ValidationError("Car is already booked for these dates", field="startDate")

    booking = gateway.createBooking(record.toRow())
    logger.info(
        "Booking %s created for car %s by user %s (%s, total %s)",
        booking.id, car.id, user.id, booking.status, booking.total_amount,
    )
    return booking, record.price


def getBookingFor(gateway, user, bookingId: int):
    """The booking, visible to its owner and to the host of the car."""
    booking = _requireBooking(gateway, bookingId)
    if booking.user_id == user.id:
        return booking

    car = gateway.getCar(booking.car_id)
    if car and car.host_id == user.id:
        return booking
    raise ForbiddenError("You do not have access to this booking")


def confirmBooking(gateway, user, bookingId: int):
    booking = _requireBooking(gateway, bookingId)
    car = gateway.getCar(booking.car_id)
    if not car or car.host_id != user.id:
        raise ForbiddenError("Only the car's host can confirm this booking")

    patch = transitionBookingStatus(booking, CONFIRM)
    updated = gateway.updateBooking(bookingId, patch)
    if updated is None:
        raise NotFoundError("Booking not found")

    logger.info("Booking %s confirmed by host %s", bookingId, user.id)
    return updated


def cancelBooking(gateway, user, bookingId: int, now: Optional[datetime] = None):
    booking = getBookingFor(gateway, user, bookingId)

    patch = transitionBookingStatus(booking, CANCEL, now=now)
    updated = gateway.updateBooking(bookingId, patch)
    if updated is None:
        raise NotFoundError("Booking not found")

    logger.info("Booking %s cancelled by user %s, refund %s%%", bookingId, user.id, patch["refund_percent"])
    return updated


def getCancellationQuote(gateway, user, bookingId: int, now: Optional[datetime] = None) -> CancellationQuote:
    booking = getBookingFor(gateway, user, bookingId)
    if booking.status == CANCELLED:
        # Report the refund that was applied, measured from the cancellation time
        refundPercent = booking.refund_percent or 0
        hours = 0.0
        if booking.cancelled_at is not None:
            lead = booking.start_date - booking.cancelled_at
            hours = round(lead.total_seconds() / 3600, 2)
        return CancellationQuote(
            hoursBeforePickup=hours,
            fullRefund=refundPercent == FULL_REFUND_PERCENT,
            refundPercent=refundPercent,
        )
    return evaluateCancellation(booking.start_date, toNaiveUtc(now) if now else None)


def getHostBookings(gateway, hostId: int) -> List[tuple]:
    """(booking, car) pairs for every car the host owns."""
    result = []
    for car in gateway.getCarsByHost(hostId):
        for booking in gateway.getBookingsByCar(car.id):
            result.append((booking, car))
    result.sort(key=lambda pair: pair[0].start_date)
    return result


def getHostDashboard(gateway, hostId: int) -> dict:
    cars = gateway.getCarsByHost(hostId)
    pairs = getHostBookings(gateway, hostId)

    counts = {"pending": 0, "confirmed": 0, "cancelled": 0}
    earnings = 0
    for booking, _ in pairs:
        counts[booking.status] = counts.get(booking.status, 0) + 1
        if booking.status == "confirmed":
            earnings += booking.total_amount

    return {
        "totalCars": len(cars),
        "availableCars": sum(1 for c in cars if c.available),
        "pendingBookings": counts["pending"],
        "confirmedBookings": counts["confirmed"],
        "cancelledBookings": counts["cancelled"],
        "confirmedEarnings": earnings,
    }
