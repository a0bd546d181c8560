from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from enum import Enum

from app.schemas.car import CarResponse


class PaymentMethod(str, Enum):
    CARD = "card"
    AIRTEL = "airtel"
    PAYPAL = "paypal"


class BookingQuoteRequest(BaseModel):
    carId: int
    startDate: datetime
    endDate: datetime


class BookingCreateRequest(BaseModel):
    """
    Raw booking form input.

    paymentMethod is a plain string so that unknown values come back as a
    field-level validation error instead of a schema error.
    totalAmount is accepted for compatibility but always recomputed.
    """
    carId: int
    startDate: datetime
    endDate: datetime
    pickupLocation: Optional[str] = None
    differentDropoff: bool = False
    dropoffLocation: Optional[str] = None
    paymentMethod: str = PaymentMethod.CARD.value
    totalAmount: Optional[int] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "carId": 1,
            "startDate": "2026-04-16T10:30:00",
            "endDate": "2026-04-24T10:30:00",
            "pickupLocation": "ADL",
            "differentDropoff": False,
            "paymentMethod": "airtel"
        }
    })


class PriceBreakdownResponse(BaseModel):
    days: int
    subtotal: int
    serviceFee: int
    insuranceFee: int
    taxes: int
    cleaningFee: int
    weeklyDiscount: int
    longTermDiscount: int
    totalDiscounts: int
    total: int
    securityDeposit: int
    payNow: int
    payLater: int
    currency: str
    formattedTotal: str


class BookingResponse(BaseModel):
    id: int
    carId: int
    userId: int
    startDate: datetime
    endDate: datetime
    pickupLocation: str
    dropoffLocation: str
    totalAmount: int
    currency: str
    paymentMethod: Optional[str] = None
    status: str
    refundPercent: Optional[int] = None
    cancelledAt: Optional[datetime] = None
    duration: str
    createdAt: Optional[datetime] = None


class BookingCreatedResponse(BookingResponse):
    price: PriceBreakdownResponse


class BookingWithCarResponse(BookingResponse):
    car: CarResponse


class CancellationQuoteResponse(BaseModel):
    bookingId: int
    status: str
    hoursBeforePickup: float
    fullRefund: bool
    refundPercent: int
    policy: str
