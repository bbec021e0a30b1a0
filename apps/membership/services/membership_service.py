"""
Membership service combining classification, privileges and progression.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from ..config import get_loyalty_config
from ..models import Tier
from .access_gate import AccessDecision, authorize
from .privilege_resolver import all_capabilities, privileges_for, required_tier_for
from .progression_calculator import ProgressionResult, progression
from .tier_classifier import classify, coerce_date, months_between

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoyaltySnapshot:
    """Everything derived from one enrollment date at one point in time."""
    tier: Tier
    badge: str
    elapsed_months: int
    privileges: tuple
    progression: ProgressionResult

    @property
    def next_tier(self) -> Optional[Tier]:
        return self.progression.next_tier


class MembershipService:
    """Service class for loyalty tier operations"""

    @staticmethod
    def calculate_loyalty(enrolled_on, now, config=None):
        """Derive the full loyalty snapshot for an enrollment date"""
        config = config or get_loyalty_config()
        return MembershipService.snapshot_for(classify(enrolled_on, now, config), config)

    @staticmethod
    def snapshot_for(classification, config=None):
        """Snapshot for an existing classification"""
        config = config or get_loyalty_config()
        return LoyaltySnapshot(
            tier=classification.tier,
            badge=config.badge(classification.tier),
            elapsed_months=classification.elapsed_months,
            privileges=privileges_for(classification.tier, config),
            progression=progression(classification.tier, classification.elapsed_months, config),
        )

    @staticmethod
    def loyalty_for_company(company, now, config=None):
        """Snapshot for a company; a missing company counts as not enrolled"""
        enrolled_on = company.membership_start_date if company is not None else None
        return MembershipService.calculate_loyalty(enrolled_on, now, config)

    @staticmethod
    def check_tier(company, required_tier, now, config=None):
        """Gate an action on a minimum tier"""
        snapshot = MembershipService.loyalty_for_company(company, now, config)
        return authorize(snapshot.tier, required_tier)

    @staticmethod
    def check_capability(company, capability, now, config=None):
        """
        Gate an action on a capability. On denial the decision names the
        lowest tier that grants the capability.
        """
        config = config or get_loyalty_config()
        if capability not in all_capabilities(config):
            logger.error(f"Capability '{capability}' is not granted by any tier")
            return AccessDecision(allowed=False)
        required = required_tier_for(capability, config)
        snapshot = MembershipService.loyalty_for_company(company, now, config)
        return authorize(snapshot.tier, required)

    @staticmethod
    def tier_table(config=None):
        """Rows describing every tier, lowest first"""
        config = config or get_loyalty_config()
        rows = []
        for tier in Tier:
            previous = config.privileges_of(tier - 1) if tier > Tier.lowest() else ()
            rows.append({
                'tier': tier.key,
                'level': tier.label,
                'rank': tier.value,
                'badge': config.badge(tier),
                'min_months': config.threshold(tier),
                'privileges': list(config.privileges_of(tier)),
                'unlocks': [name for name in config.privileges_of(tier) if name not in previous],
            })
        return rows

    @staticmethod
    def format_duration(enrolled_on, now):
        """Human-readable membership length, e.g. '2 years, 3 months'"""
        start = coerce_date(enrolled_on)
        today = coerce_date(now)
        if start is None or today is None:
            return None

        total_months = months_between(start, today)
        years, months = divmod(total_months, 12)
        year_text = f"{years} year{'s' if years > 1 else ''}"
        month_text = f"{months} month{'s' if months != 1 else ''}"
        if years and months:
            return f"{year_text}, {month_text}"
        if years:
            return year_text
        return month_text
