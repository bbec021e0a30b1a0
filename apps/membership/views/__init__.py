"""
Membership views module.
"""
from .status_views import MembershipStatusView, TierTableView

__all__ = [
    'MembershipStatusView',
    'TierTableView',
]
