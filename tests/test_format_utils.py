from datetime import datetime, timedelta, timezone

from app.db.formatUtils import (
    daysBetween,
    formatDateTime,
    formatDuration,
    formatMoney,
    hoursRemainder,
    toNaiveUtc,
    utcNow,
)

START = datetime(2024, 4, 16, 10, 30)


def test_days_between_whole_days():
    assert daysBetween(START, START + timedelta(days=8)) == 8


def test_days_between_partial_day_bills_as_full_day():
    assert daysBetween(START, START + timedelta(days=8, hours=1)) == 9
    assert daysBetween(START, START + timedelta(minutes=1)) == 1


def test_days_between_clamps_to_zero():
    assert daysBetween(START, START) == 0
    assert daysBetween(START, START - timedelta(days=2)) == 0
    assert daysBetween(None, START) == 0
    assert daysBetween(START, None) == 0


def test_days_between_accepts_iso_strings_and_timezones():
    assert daysBetween("2024-04-16T10:30:00Z", "2024-04-18T10:30:00+00:00") == 2
    # 10:30 UTC and 11:30 at +01:00 are the same instant
    assert daysBetween(
        datetime(2024, 4, 16, 10, 30, tzinfo=timezone.utc),
        datetime(2024, 4, 17, 11, 30, tzinfo=timezone(timedelta(hours=1))),
    ) == 1


def test_to_naive_utc():
    aware = datetime(2024, 4, 16, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert toNaiveUtc(aware) == datetime(2024, 4, 16, 10, 0)
    assert toNaiveUtc(None) is None


def test_hours_remainder():
    assert hoursRemainder(START, START + timedelta(days=2, hours=5, minutes=30)) == 5
    assert hoursRemainder(START, START) == 0


def test_format_money():
    assert formatMoney(755500) == "755,500 FCFA"
    assert formatMoney(0, "FCFA") == "0 FCFA"
    assert formatMoney(1250, "USD") == "$1,250"
    assert formatMoney(-500, "EUR") == "-€500"
    assert formatMoney(1000000, "XAF") == "1,000,000 XAF"


def test_format_date_time():
    assert formatDateTime(START) == "April 16, 2024 at 10:30 AM"
    assert formatDateTime(datetime(2024, 1, 5, 0, 5)) == "January 5, 2024 at 12:05 AM"
    assert formatDateTime("2024-04-24T23:30:00") == "April 24, 2024 at 11:30 PM"
    assert formatDateTime(None) == ""


def test_format_duration():
    assert formatDuration(START, START + timedelta(hours=5)) == "5 hours"
    assert formatDuration(START, START + timedelta(days=1)) == "1 day"
    assert formatDuration(START, START + timedelta(days=3, hours=1)) == "3 days and 1 hour"
    assert formatDuration(START, START) == "0 hours"


def test_utc_now_is_naive_utc():
    before = datetime.now(timezone.utc).replace(tzinfo=None)
    now = utcNow()
    assert now.tzinfo is None
    assert before <= now <= before + timedelta(seconds=5)
