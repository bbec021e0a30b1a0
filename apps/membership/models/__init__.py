"""
Membership models module.

Tiers are derived from enrollment dates and never stored, so this app only
exposes the tier enumeration.
"""
from .tier import Tier

__all__ = [
    'Tier',
]
