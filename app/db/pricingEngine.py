"""
Pricing Calculator

Derives the full price breakdown of a rental from the car's daily rate and
the booking dates. The same breakdown is shown to the customer as a quote
and persisted as the booking's total, so there is exactly one fee stack.

Every percentage is taken on the subtotal (never on a running total) and
rounded half-up to whole minor units.
"""
from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP

from app.db.formatUtils import daysBetween, DateLike

SERVICE_FEE_RATE = Decimal("0.10")
TAX_RATE = Decimal("0.05")
WEEKLY_DISCOUNT_RATE = Decimal("0.05")
LONG_TERM_DISCOUNT_RATE = Decimal("0.10")
PAY_NOW_RATE = Decimal("0.25")

INSURANCE_FEE = 5000
CLEANING_FEE = 2500
SECURITY_DEPOSIT = 50000

WEEKLY_DISCOUNT_MIN_DAYS = 7
LONG_TERM_DISCOUNT_MIN_DAYS = 28


def roundHalfUp(amount: int, rate: Decimal) -> int:
    return int((Decimal(amount) * rate).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PriceBreakdown:
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

    def asDict(self) -> dict:
        return asdict(self)


def computeBookingPrice(dailyRate: int, startDate: DateLike, endDate: DateLike) -> PriceBreakdown:
    days = max(daysBetween(startDate, endDate), 0)
    subtotal = dailyRate * days

    serviceFee = roundHalfUp(subtotal, SERVICE_FEE_RATE)
    taxes = roundHalfUp(subtotal, TAX_RATE)

    weeklyDiscount = roundHalfUp(subtotal, WEEKLY_DISCOUNT_RATE) if days >= WEEKLY_DISCOUNT_MIN_DAYS else 0
    # Stacks with the weekly discount
    longTermDiscount = roundHalfUp(subtotal, LONG_TERM_DISCOUNT_RATE) if days >= LONG_TERM_DISCOUNT_MIN_DAYS else 0
    totalDiscounts = weeklyDiscount + longTermDiscount

    total = subtotal + serviceFee + INSURANCE_FEE + taxes + CLEANING_FEE - totalDiscounts

    payNow = roundHalfUp(total, PAY_NOW_RATE)

    return PriceBreakdown(
        days=days,
        subtotal=subtotal,
        serviceFee=serviceFee,
        insuranceFee=INSURANCE_FEE,
        taxes=taxes,
        cleaningFee=CLEANING_FEE,
        weeklyDiscount=weeklyDiscount,
        longTermDiscount=longTermDiscount,
        totalDiscounts=totalDiscounts,
        total=total,
        securityDeposit=SECURITY_DEPOSIT,
        payNow=payNow,
        payLater=total - payNow,
    )
