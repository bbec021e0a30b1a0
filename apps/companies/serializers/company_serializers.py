"""
Company serializers for directory, detail, update and admin operations.
"""
from rest_framework import serializers

from apps.common.clock import today
from apps.membership.serializers import LoyaltySnapshotSerializer
from apps.membership.services import MembershipService
from ..models import Company


class CompanyListSerializer(serializers.ModelSerializer):
    """
    Serializer for the directory list - profile fields plus derived loyalty.
    Used for: GET /api/companies/
    Pass `now` in the context to pin the evaluation date, and optionally
    `snapshots` (company id -> LoyaltySnapshot) to reuse ranked results.
    """
    loyalty = serializers.SerializerMethodField()
    duration = serializers.SerializerMethodField()

    class Meta:
        model = Company
        fields = [
            'id', 'company_name', 'description', 'industry', 'size', 'website',
            'membership_start_date', 'is_approved', 'created_at', 'loyalty', 'duration'
        ]
        read_only_fields = fields

    def _now(self):
        return self.context.get('now') or today()

    def get_loyalty(self, obj):
        # Directory listings hand over the snapshots computed while ranking
        snapshot = self.context.get('snapshots', {}).get(obj.pk)
        if snapshot is None:
            snapshot = MembershipService.calculate_loyalty(obj.membership_start_date, self._now())
        return LoyaltySnapshotSerializer(snapshot).data

    def get_duration(self, obj):
        return MembershipService.format_duration(obj.membership_start_date, self._now())


class CompanyDetailSerializer(CompanyListSerializer):
    """
    Serializer for company detail - adds the company's listings.
    Used for: GET /api/companies/{id}/
    """
    listings = serializers.SerializerMethodField()

    class Meta(CompanyListSerializer.Meta):
        fields = CompanyListSerializer.Meta.fields + ['listings']
        read_only_fields = fields

    def get_listings(self, obj):
        # Import here to avoid circular imports
        from apps.listings.serializers import ListingSerializer
        return ListingSerializer(obj.listings.all(), many=True).data


class CompanyUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for profile updates; every field optional.
    Used for: PUT /api/companies/{id}/
    """
    class Meta:
        model = Company
        fields = ['company_name', 'description', 'industry', 'size', 'website']
        extra_kwargs = {
            'company_name': {'required': False},
        }

    def validate_company_name(self, value):
        if not value or not value.strip():
            raise serializers.ValidationError('Company name cannot be blank')
        return value.strip()


class MembershipDateSerializer(serializers.Serializer):
    """
    Admin override of a company's enrollment date.
    Used for: PUT /api/admin/companies/{id}/date/
    """
    membership_start_date = serializers.DateField()
