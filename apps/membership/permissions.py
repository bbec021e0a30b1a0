"""
DRF permission classes backed by the access gate.

A denial becomes a 403 whose body names the tier (and capability) the acting
company is missing.
"""
import logging

from rest_framework.permissions import BasePermission

from apps.common.clock import today
from .models import Tier
from .services import MembershipService

security_logger = logging.getLogger('security')


def _acting_company(request):
    user = request.user
    if not user or not user.is_authenticated:
        return None
    return getattr(user, 'company', None)


def _now(view):
    clock = getattr(view, 'clock', None)
    return clock() if clock is not None else today()


class RequiresCapability(BasePermission):
    """Allow only companies whose current tier grants `capability`."""
    capability = None

    def has_permission(self, request, view):
        company = _acting_company(request)
        decision = MembershipService.check_capability(company, self.capability, _now(view))
        if decision.allowed:
            return True

        required_tier = decision.required_tier
        tier_label = required_tier.label if required_tier is not None else None
        self.message = {
            'detail': (
                f"This action requires {tier_label} level or above"
                if tier_label else f"No loyalty level grants {self.capability}"
            ),
            'required_capability': self.capability,
            'required_tier': tier_label,
        }
        security_logger.info(
            f"Denied '{self.capability}' for user {getattr(request.user, 'id', None)}: "
            f"requires {tier_label}"
        )
        return False


class RequiresTier(BasePermission):
    """Allow only companies at or above `tier`."""
    tier = Tier.lowest()

    def has_permission(self, request, view):
        company = _acting_company(request)
        decision = MembershipService.check_tier(company, self.tier, _now(view))
        if decision.allowed:
            return True

        self.message = {
            'detail': f"This action requires {decision.required_tier.label} level or above",
            'required_tier': decision.required_tier.label,
        }
        security_logger.info(
            f"Denied tier-gated action for user {getattr(request.user, 'id', None)}: "
            f"requires {decision.required_tier.label}"
        )
        return False


def capability_required(capability):
    """Build a permission class gating on one capability."""
    return type(f'Requires_{capability}', (RequiresCapability,), {'capability': capability})


def tier_required(tier):
    """Build a permission class gating on a minimum tier."""
    tier = Tier.parse(tier)
    return type(f'Requires_{tier.key}', (RequiresTier,), {'tier': tier})
