"""
Next-tier projection for a classified enrollment.
"""
from dataclasses import dataclass
from typing import Optional

from ..config import get_loyalty_config
from ..models import Tier
from .privilege_resolver import new_privileges


@dataclass(frozen=True)
class ProgressionResult:
    current_tier: Tier
    elapsed_months: int
    next_tier: Optional[Tier] = None
    months_until_next: Optional[int] = None
    message: Optional[str] = None


def progression_message(next_tier, months_until_next, capability):
    unit = 'month' if months_until_next == 1 else 'months'
    return (
        f"You are {months_until_next} {unit} away from {next_tier.label}! "
        f"Unlock {capability}."
    )


def progression(tier, elapsed_months, config=None):
    """
    Work out the next tier, the months left until it opens and the message
    advertising the first capability it unlocks.
    """
    config = config or get_loyalty_config()
    tier = Tier.parse(tier)
    elapsed_months = max(0, int(elapsed_months))

    if tier == Tier.highest():
        return ProgressionResult(current_tier=tier, elapsed_months=elapsed_months)

    next_tier = Tier(tier + 1)
    months_until_next = max(0, config.thresholds[next_tier] - elapsed_months)
    unlocked = new_privileges(tier, next_tier, config)
    message = progression_message(next_tier, months_until_next, unlocked[0]) if unlocked else None

    return ProgressionResult(
        current_tier=tier,
        elapsed_months=elapsed_months,
        next_tier=next_tier,
        months_until_next=months_until_next,
        message=message,
    )
