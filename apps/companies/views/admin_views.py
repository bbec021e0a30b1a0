"""
Network administration views: approval queue and enrollment date overrides.
"""
from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAdminUser
from rest_framework.views import APIView

from apps.common.clock import today
from apps.common.utils import success_response, error_response
from ..models import Company
from ..serializers import CompanyListSerializer, MembershipDateSerializer
from ..services import CompanyService


class PendingCompaniesView(APIView):
    """Companies awaiting approval - GET /api/admin/pending/"""
    permission_classes = [IsAdminUser]
    clock = staticmethod(today)

    def get(self, request):
        companies = CompanyService.pending_companies()
        serializer = CompanyListSerializer(companies, many=True, context={'now': self.clock()})
        return success_response(serializer.data)


class ApproveCompanyView(APIView):
    """Approve a company - POST /api/admin/approve/{id}/"""
    permission_classes = [IsAdminUser]
    clock = staticmethod(today)

    def post(self, request, pk):
        company = get_object_or_404(Company, pk=pk)
        now = self.clock()
        CompanyService.approve(company, now, actor=request.user)
        data = CompanyListSerializer(company, context={'now': now}).data
        return success_response(data, 'Company approved')


class CompanyMembershipDateView(APIView):
    """Set a company's enrollment date - PUT /api/admin/companies/{id}/date/"""
    permission_classes = [IsAdminUser]
    clock = staticmethod(today)

    def put(self, request, pk):
        company = get_object_or_404(Company, pk=pk)
        serializer = MembershipDateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('membership_start_date required', serializer.errors)

        CompanyService.set_membership_start_date(
            company, serializer.validated_data['membership_start_date'], actor=request.user
        )
        data = CompanyListSerializer(company, context={'now': self.clock()}).data
        return success_response(data, 'Membership date updated')
