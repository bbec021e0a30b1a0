"""
Loyalty configuration: tier thresholds, the tier -> privilege table and badges.

The configuration is validated and frozen once when the membership app is
ready. A malformed table raises LoyaltyConfigurationError, which Django
surfaces as ImproperlyConfigured and refuses to start.
"""
import logging
from dataclasses import dataclass

from django.apps import apps as django_apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .models import Tier

logger = logging.getLogger(__name__)


class LoyaltyConfigurationError(ImproperlyConfigured):
    """The loyalty thresholds or privilege table are unusable."""


@dataclass(frozen=True)
class LoyaltyConfig:
    """
    Immutable loyalty rules. Every tuple is indexed by tier rank.

    thresholds: inclusive lower bound (in whole months) of each tier
    privileges: capability names granted by each tier, in declaration order
    badges: display badge of each tier
    """
    thresholds: tuple
    privileges: tuple
    badges: tuple

    def threshold(self, tier):
        return self.thresholds[Tier.parse(tier)]

    def privileges_of(self, tier):
        return self.privileges[Tier.parse(tier)]

    def badge(self, tier):
        return self.badges[Tier.parse(tier)]


def _normalise_table(table, name):
    """Re-key a {tier-ish: value} mapping by Tier, rejecting unknown tiers."""
    normalised = {}
    for raw_key, value in dict(table or {}).items():
        try:
            tier = Tier.parse(raw_key)
        except ValueError as e:
            raise LoyaltyConfigurationError(f"{name}: {e}") from None
        if tier in normalised:
            raise LoyaltyConfigurationError(f"{name}: tier {tier.label} declared twice")
        normalised[tier] = value
    return normalised


def build_loyalty_config(thresholds, privileges, badges=None):
    """
    Validate raw settings values and build a LoyaltyConfig.

    Args:
        thresholds: one month count per tier, lowest tier first
        privileges: mapping of tier (name, rank or Tier) to capability names
        badges: optional mapping of tier to badge text

    Raises:
        LoyaltyConfigurationError: if any rule below is violated
    """
    tiers = list(Tier)

    thresholds = list(thresholds or [])
    if len(thresholds) != len(tiers):
        raise LoyaltyConfigurationError(
            f"Expected {len(tiers)} tier thresholds, got {len(thresholds)}"
        )
    try:
        thresholds = [int(value) for value in thresholds]
    except (TypeError, ValueError):
        raise LoyaltyConfigurationError(f"Tier thresholds must be integers: {thresholds!r}") from None
    if thresholds[0] != 0:
        raise LoyaltyConfigurationError("The lowest tier threshold must be 0 months")
    for lower, higher in zip(thresholds, thresholds[1:]):
        if higher <= lower:
            raise LoyaltyConfigurationError(
                f"Tier thresholds must be strictly ascending: {thresholds!r}"
            )

    table = _normalise_table(privileges, 'LOYALTY_PRIVILEGES')
    missing = [tier.label for tier in tiers if tier not in table]
    if missing:
        raise LoyaltyConfigurationError(f"No privileges declared for: {', '.join(missing)}")

    resolved = []
    for tier in tiers:
        names = tuple(table[tier])
        if len(set(names)) != len(names):
            raise LoyaltyConfigurationError(f"{tier.label} lists a capability more than once")
        resolved.append(names)

    if not resolved[0]:
        raise LoyaltyConfigurationError(f"{tiers[0].label} must grant at least one capability")

    for lower, higher in zip(tiers, tiers[1:]):
        dropped = set(resolved[lower]) - set(resolved[higher])
        if dropped:
            raise LoyaltyConfigurationError(
                f"{higher.label} must include every capability of {lower.label}; "
                f"missing {sorted(dropped)}"
            )

    top, below_top = tiers[-1], tiers[-2]
    if not set(resolved[top]) - set(resolved[below_top]):
        raise LoyaltyConfigurationError(f"{top.label} must grant at least one exclusive capability")

    badge_table = _normalise_table(badges, 'LOYALTY_BADGES')
    resolved_badges = tuple(str(badge_table.get(tier, '')) for tier in tiers)

    return LoyaltyConfig(
        thresholds=tuple(thresholds),
        privileges=tuple(resolved),
        badges=resolved_badges,
    )


def load_loyalty_config():
    """Build the process-wide configuration from Django settings."""
    loyalty_config = build_loyalty_config(
        getattr(settings, 'LOYALTY_TIER_THRESHOLDS', None),
        getattr(settings, 'LOYALTY_PRIVILEGES', None),
        getattr(settings, 'LOYALTY_BADGES', None),
    )
    logger.info(f"Loyalty tiers loaded with thresholds {loyalty_config.thresholds}")
    return loyalty_config


def get_loyalty_config():
    """Configuration loaded by the membership app at startup."""
    loyalty_config = django_apps.get_app_config('membership').loyalty_config
    if loyalty_config is None:
        raise LoyaltyConfigurationError("Loyalty configuration has not been loaded")
    return loyalty_config
