"""
Access decisions comparing a held tier (or privilege set) with a requirement.

A denial is an ordinary result, not an exception. Callers translate it into
their own refusal (for the API, a 403 naming the missing tier).
"""
from dataclasses import dataclass
from typing import Optional

from ..models import Tier


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    required_tier: Optional[Tier] = None

    def __bool__(self):
        return self.allowed


def authorize(held_tier, required_tier):
    """Allow when held_tier ranks at or above required_tier."""
    held = Tier.parse(held_tier)
    required = Tier.parse(required_tier)
    if held >= required:
        return AccessDecision(allowed=True)
    return AccessDecision(allowed=False, required_tier=required)


def authorize_capability(held_privileges, capability):
    """Allow when capability is part of the held privilege set."""
    return capability in held_privileges
