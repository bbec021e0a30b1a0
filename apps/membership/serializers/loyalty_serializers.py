"""
Loyalty snapshot serializers.
"""
from rest_framework import serializers


class LoyaltySnapshotSerializer(serializers.Serializer):
    """
    Serializer for a derived loyalty snapshot.
    Used for: GET /api/membership/status/ and embedded in company payloads.
    """
    level = serializers.CharField(source='tier.label', read_only=True)
    tier = serializers.CharField(source='tier.key', read_only=True)
    tier_rank = serializers.IntegerField(source='tier.value', read_only=True)
    badge = serializers.CharField(read_only=True)
    months_active = serializers.IntegerField(source='elapsed_months', read_only=True)
    privileges = serializers.ListField(child=serializers.CharField(), read_only=True)
    next_level = serializers.SerializerMethodField()
    months_until_next = serializers.IntegerField(source='progression.months_until_next', read_only=True)
    next_level_message = serializers.CharField(source='progression.message', read_only=True)

    def get_next_level(self, obj):
        next_tier = obj.progression.next_tier
        return next_tier.label if next_tier is not None else None
