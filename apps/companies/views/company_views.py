"""
Company directory, detail and profile update views.
"""
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from apps.common.clock import today
from apps.common.utils import success_response, error_response
from ..models import Company
from ..permissions import IsCompanyMemberOrAdmin
from ..serializers import (
    CompanyDetailSerializer, CompanyListSerializer, CompanyUpdateSerializer
)
from ..services import CompanyService, SortKey


class CompanyListView(APIView):
    """Directory endpoint - GET /api/companies/?sort=&industry=&size="""
    permission_classes = [AllowAny]
    clock = staticmethod(today)

    def get(self, request):
        try:
            sort_key = SortKey.parse(request.query_params.get('sort'))
        except ValueError as e:
            return error_response(str(e), status_code=status.HTTP_400_BAD_REQUEST)

        now = self.clock()
        ranked = CompanyService.directory(
            now,
            sort_key=sort_key,
            industry=request.query_params.get('industry') or None,
            size=request.query_params.get('size') or None,
        )
        companies = [company for company, _ in ranked]
        snapshots = {company.pk: snapshot for company, snapshot in ranked}
        serializer = CompanyListSerializer(
            companies, many=True, context={'now': now, 'snapshots': snapshots}
        )
        return success_response(serializer.data)


class CompanyDetailView(APIView):
    """Company profile - GET is public, PUT is limited to members and admins"""
    clock = staticmethod(today)

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAuthenticated(), IsCompanyMemberOrAdmin()]

    def get(self, request, pk):
        company = get_object_or_404(Company.objects.prefetch_related('listings'), pk=pk)
        serializer = CompanyDetailSerializer(company, context={'now': self.clock()})
        return success_response(serializer.data)

    def put(self, request, pk):
        company = get_object_or_404(Company, pk=pk)
        self.check_object_permissions(request, company)

        serializer = CompanyUpdateSerializer(company, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Company update failed', serializer.errors)
        serializer.save()

        data = CompanyListSerializer(company, context={'now': self.clock()}).data
        return success_response(data, 'Company updated successfully')
