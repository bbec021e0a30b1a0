"""
Membership status views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated

from apps.common.clock import today
from apps.common.utils import success_response
from ..serializers import LoyaltySnapshotSerializer, TierSerializer
from ..services import MembershipService


class MembershipStatusView(APIView):
    """Loyalty snapshot of the acting user's company"""
    permission_classes = [IsAuthenticated]
    clock = staticmethod(today)

    def get(self, request):
        company = getattr(request.user, 'company', None)
        now = self.clock()
        snapshot = MembershipService.loyalty_for_company(company, now)
        data = LoyaltySnapshotSerializer(snapshot).data
        data['duration'] = MembershipService.format_duration(
            company.membership_start_date if company else None, now
        )
        return success_response(data)


class TierTableView(APIView):
    """Thresholds, badges and privileges of every tier"""
    permission_classes = [AllowAny]

    def get(self, request):
        serializer = TierSerializer(MembershipService.tier_table(), many=True)
        return success_response(serializer.data)
