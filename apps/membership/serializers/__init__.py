"""
Membership serializers module.
"""
from .loyalty_serializers import LoyaltySnapshotSerializer
from .tier_serializers import TierSerializer

__all__ = [
    'LoyaltySnapshotSerializer',
    'TierSerializer',
]
