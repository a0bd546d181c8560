"""
Date and money helpers shared by pricing, validation and the API layer.

All money is integer minor units. All datetimes are compared as naive UTC.
"""
from datetime import datetime, timezone
from typing import Optional, Union

DateLike = Union[datetime, str, None]

# Currencies written before the amount; everything else is a suffix (e.g. "FCFA")
PREFIX_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def utcNow() -> datetime:
    """Current time as naive UTC, the form every stored datetime uses."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def toNaiveUtc(value: DateLike) -> Optional[datetime]:
    """Parse ISO strings and drop tzinfo after converting to UTC."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def daysBetween(start: DateLike, end: DateLike) -> int:
    """
    Number of billable days between two instants.

    Any partial day bills as a full day (ceiling). Missing inputs or
    end <= start give 0, never a negative count.
    """
    start = toNaiveUtc(start)
    end = toNaiveUtc(end)
    if start is None or end is None or end <= start:
        return 0

    delta = end - start
    days = delta.days
    if delta.seconds or delta.microseconds:
        days += 1
    return days


def hoursRemainder(start: DateLike, end: DateLike) -> int:
    """Whole hours beyond the last full day of the interval."""
    start = toNaiveUtc(start)
    end = toNaiveUtc(end)
    if start is None or end is None or end <= start:
        return 0
    return (end - start).seconds // 3600


def formatMoney(amount: int, currency: str = "FCFA") -> str:
    grouped = f"{int(amount):,}"
    symbol = PREFIX_SYMBOLS.get(currency.upper())
    if symbol:
        if grouped.startswith("-"):
            return f"-{symbol}{grouped[1:]}"
        return f"{symbol}{grouped}"
    return f"{grouped} {currency}"


def formatDateTime(value: DateLike) -> str:
    """Display form, e.g. 'April 16, 2024 at 10:30 AM'."""
    value = toNaiveUtc(value)
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value.strftime('%B')} {value.day}, {value.year} at {hour}:{value.minute:02d} {meridiem}"


def formatDuration(start: DateLike, end: DateLike) -> str:
    start = toNaiveUtc(start)
    end = toNaiveUtc(end)
    if start is None or end is None or end <= start:
        return "0 hours"

    delta = end - start
    days = delta.days
    hours = delta.seconds // 3600

    def plural(n, word):
        return f"{n} {word}{'' if n == 1 else 's'}"

    if days == 0:
        return plural(hours, "hour")
    if hours == 0:
        return plural(days, "day")
    return f"{plural(days, 'day')} and {plural(hours, 'hour')}"
