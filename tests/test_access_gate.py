"""
Unit tests for access decisions.
"""
import pytest

from apps.membership.models import Tier
from apps.membership.services import authorize, authorize_capability


def test_lower_tier_is_denied_and_names_required_tier():
    decision = authorize(Tier.PARTICIPANT, Tier.CONTRIBUTOR)
    assert decision.allowed is False
    assert decision.required_tier == Tier.CONTRIBUTOR
    assert not decision


def test_equal_and_higher_tiers_are_allowed():
    for held in (Tier.CONTRIBUTOR, Tier.CHAMPION):
        decision = authorize(held, Tier.CONTRIBUTOR)
        assert decision.allowed is True
        assert decision.required_tier is None
        assert decision


def test_lowest_requirement_always_allowed():
    assert all(authorize(tier, Tier.EXPLORER) for tier in Tier)


def test_accepts_tier_names():
    assert authorize('champion', 'CONTRIBUTOR').allowed
    assert not authorize('explorer', 'Participant').allowed


def test_unknown_tier_name_is_rejected():
    with pytest.raises(ValueError):
        authorize('platinum', Tier.EXPLORER)


def test_capability_check_uses_held_set():
    held = ('view_network', 'attend_events')
    assert authorize_capability(held, 'attend_events') is True
    assert authorize_capability(held, 'create_listings') is False
