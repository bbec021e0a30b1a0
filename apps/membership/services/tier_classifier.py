"""
Tier classification from an enrollment date.

Elapsed time is counted in complete calendar months: the year/month
difference, minus one when the current day-of-month is before the
enrollment day-of-month.
"""
from calendar import monthrange
from dataclasses import dataclass
from datetime import date, datetime

from ..config import get_loyalty_config
from ..models import Tier


@dataclass(frozen=True)
class Classification:
    tier: Tier
    elapsed_months: int


def _parse_iso(text):
    """Whole-string ISO-8601 date or datetime; None when anything is left over."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def coerce_date(value):
    """
    Interpret a date-like value, returning None for anything unusable.

    Accepts date, datetime (reduced to its date) and ISO-8601 date or
    datetime strings. A string must parse as a whole; trailing text makes
    it unusable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        return _parse_iso(text)
    return None


def months_between(start, end):
    """Complete calendar months from start to end, never negative."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(0, months)


def months_before(day, months):
    """The same day-of-month `months` calendar months before `day`, clamped to the month's end."""
    total = day.year * 12 + (day.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    return date(year, month, min(day.day, monthrange(year, month)[1]))


def tier_for_months(elapsed_months, config=None):
    """Highest tier whose threshold is at or below elapsed_months."""
    config = config or get_loyalty_config()
    for tier in reversed(Tier):
        if elapsed_months >= config.thresholds[tier]:
            return tier
    return Tier.lowest()


def classify(enrolled_on, now, config=None):
    """
    Classify an enrollment into a tier.

    Missing or malformed dates fall back to the lowest tier with zero elapsed
    months; this function never raises for bad date input.
    """
    config = config or get_loyalty_config()
    start = coerce_date(enrolled_on)
    today = coerce_date(now)
    if start is None or today is None:
        return Classification(tier=Tier.lowest(), elapsed_months=0)

    elapsed = months_between(start, today)
    return Classification(tier=tier_for_months(elapsed, config), elapsed_months=elapsed)
