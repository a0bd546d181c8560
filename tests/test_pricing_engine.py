from datetime import datetime, timedelta

import pytest

from app.db.pricingEngine import (
    CLEANING_FEE,
    INSURANCE_FEE,
    SECURITY_DEPOSIT,
    computeBookingPrice,
    roundHalfUp,
)
from decimal import Decimal

START = datetime(2024, 4, 16, 10, 30)


def priceFor(rate, days):
    return computeBookingPrice(rate, START, START + timedelta(days=days))


def test_eight_day_pajero_breakdown():
    price = priceFor(85000, 8)

    assert price.days == 8
    assert price.subtotal == 680000
    assert price.serviceFee == 68000
    assert price.taxes == 34000
    assert price.insuranceFee == 5000
    assert price.cleaningFee == 2500
    assert price.weeklyDiscount == 34000
    assert price.longTermDiscount == 0
    assert price.totalDiscounts == 34000
    assert price.total == 755500
    assert price.securityDeposit == 50000
    assert price.payNow == 188875
    assert price.payLater == 566625


@pytest.mark.parametrize("rate", [1, 45000, 155000])
def test_zero_days_costs_only_fixed_fees(rate):
    price = computeBookingPrice(rate, START, START)

    assert price.days == 0
    assert price.subtotal == 0
    assert price.serviceFee == 0
    assert price.taxes == 0
    assert price.totalDiscounts == 0
    assert price.total == INSURANCE_FEE + CLEANING_FEE == 7500


def test_reversed_dates_do_not_raise():
    price = computeBookingPrice(85000, START, START - timedelta(days=3))
    assert price.days == 0
    assert price.total == 7500


def test_deposit_is_not_part_of_total():
    price = priceFor(45000, 2)
    assert price.securityDeposit == SECURITY_DEPOSIT
    assert price.total == price.subtotal + price.serviceFee + price.taxes + INSURANCE_FEE + CLEANING_FEE
    assert price.payNow + price.payLater == price.total


def test_weekly_discount_boundary():
    assert priceFor(10000, 6).weeklyDiscount == 0
    assert priceFor(10000, 7).weeklyDiscount == 3500


def test_long_term_discount_boundary_and_stacking():
    at27 = priceFor(10000, 27)
    at28 = priceFor(10000, 28)

    assert at27.longTermDiscount == 0
    assert at27.weeklyDiscount == 13500

    assert at28.weeklyDiscount == 14000
    assert at28.longTermDiscount == 28000
    assert at28.totalDiscounts == 42000


def test_percentages_round_half_up_on_subtotal():
    # subtotal 45 -> 10% = 4.5 -> 5, 5% = 2.25 -> 2
    price = computeBookingPrice(45, START, START + timedelta(days=1))
    assert price.serviceFee == 5
    assert price.taxes == 2
    assert roundHalfUp(5, Decimal("0.5")) == 3
    assert roundHalfUp(15, Decimal("0.5")) == 8


def test_pure_and_repeatable():
    first = priceFor(72000, 12)
    second = priceFor(72000, 12)
    assert first == second
    assert first.asDict() == second.asDict()


@pytest.mark.parametrize("low,high", [(0, 6), (7, 27), (28, 60)])
def test_total_non_decreasing_within_discount_tier(low, high):
    totals = [priceFor(65500, d).total for d in range(low, high + 1)]
    assert totals == sorted(totals)


def test_partial_day_bills_full_day():
    price = computeBookingPrice(85000, START, START + timedelta(days=2, hours=1))
    assert price.days == 3
    assert price.subtotal == 255000
