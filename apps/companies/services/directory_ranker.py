"""
Directory ordering and filtering for member companies.

Ordering is a pure re-sort: every key ends with the name and the id, so the
same set of entries always comes back in the same order whatever order it
was supplied in.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from django.db import models

from apps.membership.config import get_loyalty_config
from apps.membership.services import Classification, classify


class SortKey(models.TextChoices):
    NAME = 'name', 'Name'
    DURATION = 'duration', 'Membership duration'
    TIER = 'tier', 'Loyalty tier'

    @classmethod
    def parse(cls, value):
        """Resolve a sort key; empty means NAME. Raises ValueError when unknown."""
        if isinstance(value, cls):
            return value
        if value is None or str(value).strip() == '':
            return cls.NAME
        text = str(value).strip().lower()
        if text in _ALIASES:
            return _ALIASES[text]
        try:
            return cls(text)
        except ValueError:
            choices = ', '.join([key.value for key in cls] + sorted(_ALIASES))
            raise ValueError(f"Unknown sort key {value!r}; expected one of {choices}") from None


_ALIASES = {
    'loyalty': SortKey.TIER,
}


@dataclass(frozen=True)
class DirectoryEntry:
    """Read-only view of a company as the ranker sees it"""
    id: Any
    name: str
    enrolled_on: Optional[date] = None
    industry: Optional[str] = None
    size: Optional[str] = None

    @classmethod
    def from_company(cls, company):
        return cls(
            id=company.pk,
            name=company.company_name,
            enrolled_on=company.membership_start_date,
            industry=company.industry,
            size=company.size,
        )


@dataclass(frozen=True)
class RankedEntry:
    entry: Any
    classification: Classification


def _name(entry):
    return entry.name or ''


def _identity(entry):
    return str(entry.id) if entry.id is not None else ''


def _by_name(ranked):
    name = _name(ranked.entry)
    return (name.casefold(), name, _identity(ranked.entry))


def _by_duration(ranked):
    return (-ranked.classification.elapsed_months,) + _by_name(ranked)


def _by_tier(ranked):
    return (-ranked.classification.tier,) + _by_duration(ranked)


SORT_FUNCTIONS = {
    SortKey.NAME: _by_name,
    SortKey.DURATION: _by_duration,
    SortKey.TIER: _by_tier,
}


def matches(entry, industry=None, size=None):
    """Filter predicate: exact match on each filter that is set"""
    if industry and entry.industry != industry:
        return False
    if size and entry.size != size:
        return False
    return True


def rank_with_loyalty(entries, sort_key, now, *, industry=None, size=None, config=None):
    """
    Filter then order entries, keeping each entry's classification.

    Entries may be any objects exposing id, name, enrolled_on, industry
    and size (see DirectoryEntry).
    """
    config = config or get_loyalty_config()
    sort_key = SortKey.parse(sort_key)

    ranked = [
        RankedEntry(entry=entry, classification=classify(entry.enrolled_on, now, config))
        for entry in entries
        if matches(entry, industry, size)
    ]
    ranked.sort(key=SORT_FUNCTIONS[sort_key])
    return ranked


def rank(entries, sort_key, now, *, industry=None, size=None, config=None):
    """Filter then order entries; returns the entries themselves"""
    ranked = rank_with_loyalty(
        entries, sort_key, now, industry=industry, size=size, config=config
    )
    return [item.entry for item in ranked]
