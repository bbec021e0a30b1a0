"""
Membership services module.

The loyalty engine: tier classification, privilege resolution, progression
and access decisions, plus the MembershipService facade.
"""
from .access_gate import AccessDecision, authorize, authorize_capability
from .membership_service import LoyaltySnapshot, MembershipService
from .privilege_resolver import (
    all_capabilities, new_privileges, privileges_for, required_tier_for
)
from .progression_calculator import ProgressionResult, progression
from .tier_classifier import (
    Classification, classify, coerce_date, months_before, months_between,
    tier_for_months
)

__all__ = [
    'AccessDecision',
    'Classification',
    'LoyaltySnapshot',
    'MembershipService',
    'ProgressionResult',
    'all_capabilities',
    'authorize',
    'authorize_capability',
    'classify',
    'coerce_date',
    'months_before',
    'months_between',
    'new_privileges',
    'privileges_for',
    'progression',
    'required_tier_for',
    'tier_for_months',
]
