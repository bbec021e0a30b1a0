"""
Listing views: browse, publish, edit and withdraw.
"""
import logging

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.views import APIView

from apps.common.clock import today
from apps.common.utils import success_response, error_response
from apps.companies.permissions import IsApprovedMember, IsCompanyMemberOrAdmin
from ..models import Listing
from ..permissions import CanPublishListings
from ..serializers import ListingSerializer, ListingWriteSerializer

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('security.audit')


class ListingListCreateView(APIView):
    """GET /api/listings/?category= and POST /api/listings/"""
    clock = staticmethod(today)

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAuthenticated(), CanPublishListings(), IsApprovedMember()]
        return [IsAuthenticated()]

    def get(self, request):
        listings = Listing.objects.select_related('company')
        category = request.query_params.get('category')
        if category:
            listings = listings.filter(category=category)
        serializer = ListingSerializer(listings, many=True)
        return success_response(serializer.data)

    def post(self, request):
        serializer = ListingWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Listing creation failed', serializer.errors)

        listing = serializer.save(company=request.user.company)
        logger.info(f"Listing {listing.id} published by company {listing.company_id}")
        return success_response(
            ListingSerializer(listing).data,
            'Listing created',
            status_code=status.HTTP_201_CREATED,
        )


class ListingDetailView(APIView):
    """PUT and DELETE /api/listings/{id}/"""
    clock = staticmethod(today)

    def get_permissions(self):
        if self.request.method == 'PUT':
            return [IsAuthenticated(), CanPublishListings(), IsCompanyMemberOrAdmin()]
        return [IsAuthenticated(), IsCompanyMemberOrAdmin()]

    def _get_listing(self, request, pk):
        listing = get_object_or_404(Listing.objects.select_related('company'), pk=pk)
        self.check_object_permissions(request, listing)
        return listing

    def put(self, request, pk):
        listing = self._get_listing(request, pk)
        serializer = ListingWriteSerializer(listing, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Listing update failed', serializer.errors)
        serializer.save()
        return success_response(ListingSerializer(listing).data, 'Listing updated')

    def delete(self, request, pk):
        listing = self._get_listing(request, pk)
        listing.delete()
        logger.info(f"Listing {pk} deleted by user {request.user.id}")
        return success_response(message='Listing deleted')


class AdminListingDeleteView(APIView):
    """DELETE /api/admin/listings/{id}/"""
    permission_classes = [IsAdminUser]

    def delete(self, request, pk):
        listing = get_object_or_404(Listing, pk=pk)
        listing.delete()
        audit_logger.info(f"Listing {pk} removed by admin {request.user.id}")
        return success_response(message='Listing deleted')
