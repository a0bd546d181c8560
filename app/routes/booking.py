from typing import List, Optional

from fastapi import APIRouter, Depends

from app.config import Settings, getSettings
from app.db import bookingService
from app.db.authUtils import AuthenticatedUser
from app.db.storageGateway import StorageGateway
from app.routes.dependencies import getCurrentUser, getGateway
from app.routes.responses import bookingFields, bookingResponse, carResponse, priceResponse
from app.schemas.booking import (
    BookingCreateRequest,
    BookingCreatedResponse,
    BookingQuoteRequest,
    BookingResponse,
    BookingWithCarResponse,
    CancellationQuoteResponse,
    PriceBreakdownResponse,
)

router = APIRouter(prefix="/bookings", tags=["Booking"])

CANCELLATION_POLICY = (
    "Free cancellation up to 24 hours before pickup for a full refund. "
    "Cancellations within 24 hours of pickup are refunded at 50%."
)


@router.get("", response_model=List[BookingWithCarResponse])
def getMyBookings(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    result = []
    for booking in gateway.getBookingsByUser(currentUser.id):
        car = gateway.getCar(booking.car_id)
        if car:
            result.append(BookingWithCarResponse(**bookingFields(booking), car=carResponse(car)))
    return result


@router.get("/last-car", response_model=Optional[int])
def getLastBookedCar(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    return gateway.getLastBookedCarId(currentUser.id)


@router.post("/quote", response_model=PriceBreakdownResponse)
def quote(request: BookingQuoteRequest, gateway: StorageGateway = Depends(getGateway)):
    """
    Price breakdown shown before booking. Uses the same calculation
    that sets the persisted total.
    """
    price = bookingService.quoteBooking(gateway, request.carId, request.startDate, request.endDate)
    car = gateway.getCar(request.carId)
    return priceResponse(price, car.currency)


@router.post("", response_model=BookingCreatedResponse, status_code=201)
def createBooking(
    request: BookingCreateRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
    settings: Settings = Depends(getSettings),
):
    """
    Create a booking.

    - 400 VALIDATION_ERROR: bad dates, locations, payment method, overlap
    - 403 VERIFICATION_REQUIRED: user must finish identity verification
    """
    booking, price = bookingService.createBooking(gateway, currentUser, request, settings)
    return BookingCreatedResponse(
        **bookingFields(booking),
        price=priceResponse(price, booking.currency)
    )


@router.get("/{bookingId}", response_model=BookingResponse)
def getBooking(
    bookingId: int,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    return bookingResponse(bookingService.getBookingFor(gateway, currentUser, bookingId))


@router.get("/{bookingId}/cancellation", response_model=CancellationQuoteResponse)
def getCancellationQuote(
    bookingId: int,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    booking = bookingService.getBookingFor(gateway, currentUser, bookingId)
    quote = bookingService.getCancellationQuote(gateway, currentUser, bookingId)
    return CancellationQuoteResponse(
        bookingId=booking.id,
        status=booking.status,
        hoursBeforePickup=quote.hoursBeforePickup,
        fullRefund=quote.fullRefund,
        refundPercent=quote.refundPercent,
        policy=CANCELLATION_POLICY
    )


@router.post("/{bookingId}/confirm", response_model=BookingResponse)
def confirmBooking(
    bookingId: int,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    return bookingResponse(bookingService.confirmBooking(gateway, currentUser, bookingId))


@router.post("/{bookingId}/cancel", response_model=BookingResponse)
def cancelBooking(
    bookingId: int,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    """Cancel a pending or confirmed booking. Cancelling twice returns 409."""
    return bookingResponse(bookingService.cancelBooking(gateway, currentUser, bookingId))
