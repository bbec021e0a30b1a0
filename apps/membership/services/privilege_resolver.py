"""
Tier -> capability resolution backed by the loyalty privilege table.
"""
from ..config import get_loyalty_config
from ..models import Tier


def privileges_for(tier, config=None):
    """Capabilities granted at tier, in declaration order."""
    config = config or get_loyalty_config()
    return config.privileges_of(tier)


def new_privileges(lower, higher, config=None):
    """Capabilities of higher that lower lacks, in higher's declaration order."""
    config = config or get_loyalty_config()
    held = set(config.privileges_of(lower))
    return tuple(name for name in config.privileges_of(higher) if name not in held)


def required_tier_for(capability, config=None):
    """Lowest tier granting capability, or None when no tier grants it."""
    config = config or get_loyalty_config()
    for tier in Tier:
        if capability in config.privileges_of(tier):
            return tier
    return None


def all_capabilities(config=None):
    """Every capability known to the table, in the order tiers introduce them."""
    config = config or get_loyalty_config()
    return config.privileges_of(Tier.highest())
