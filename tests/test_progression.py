"""
Unit tests for next-tier progression.
"""
import pytest

from apps.membership.models import Tier
from apps.membership.services import progression


@pytest.mark.parametrize('tier, elapsed, next_tier, remaining, message', [
    (Tier.EXPLORER, 0, Tier.PARTICIPANT, 3,
     'You are 3 months away from Participant! Unlock attend_events.'),
    (Tier.EXPLORER, 1, Tier.PARTICIPANT, 2,
     'You are 2 months away from Participant! Unlock attend_events.'),
    (Tier.PARTICIPANT, 8, Tier.CONTRIBUTOR, 4,
     'You are 4 months away from Contributor! Unlock create_listings.'),
    (Tier.PARTICIPANT, 11, Tier.CONTRIBUTOR, 1,
     'You are 1 month away from Contributor! Unlock create_listings.'),
    (Tier.CONTRIBUTOR, 24, Tier.CHAMPION, 12,
     'You are 12 months away from Champion! Unlock featured_badge.'),
])
def test_next_tier_projection(loyalty_config, tier, elapsed, next_tier, remaining, message):
    result = progression(tier, elapsed, loyalty_config)
    assert result.current_tier == tier
    assert result.elapsed_months == elapsed
    assert result.next_tier == next_tier
    assert result.months_until_next == remaining
    assert result.message == message


def test_top_tier_has_no_next_tier(loyalty_config):
    result = progression(Tier.CHAMPION, 61, loyalty_config)
    assert result.next_tier is None
    assert result.months_until_next is None
    assert result.message is None


def test_remaining_months_never_negative(loyalty_config):
    result = progression(Tier.EXPLORER, 5, loyalty_config)
    assert result.months_until_next == 0


def test_accepts_tier_names(loyalty_config):
    assert progression('participant', 8, loyalty_config).next_tier == Tier.CONTRIBUTOR
