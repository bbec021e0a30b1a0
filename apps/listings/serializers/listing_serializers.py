"""
Listing serializers for list, create and update operations.
"""
from rest_framework import serializers

from ..models import Listing


class ListingSerializer(serializers.ModelSerializer):
    """
    Serializer for listing display, including the publishing company's name.
    Used for: GET /api/listings/ and nested in company detail
    """
    company_id = serializers.IntegerField(read_only=True)
    company_name = serializers.CharField(source='company.company_name', read_only=True)
    membership_start_date = serializers.DateField(source='company.membership_start_date', read_only=True)

    class Meta:
        model = Listing
        fields = [
            'id', 'company_id', 'company_name', 'membership_start_date',
            'title', 'description', 'category', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ListingWriteSerializer(serializers.ModelSerializer):
    """
    Serializer for creating and updating listings.
    Used for: POST /api/listings/, PUT /api/listings/{id}/
    The owning company comes from the acting user, never from the payload.
    """
    class Meta:
        model = Listing
        fields = ['title', 'description', 'category']

    def validate_title(self, value):
        if not value or not value.strip():
            raise serializers.ValidationError('Title cannot be blank')
        return value.strip()
