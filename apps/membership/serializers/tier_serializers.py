"""
Tier table serializers.
"""
from rest_framework import serializers


class TierSerializer(serializers.Serializer):
    """
    Serializer for one row of the tier table.
    Used for: GET /api/membership/tiers/
    """
    tier = serializers.CharField(read_only=True)
    level = serializers.CharField(read_only=True)
    rank = serializers.IntegerField(read_only=True)
    badge = serializers.CharField(read_only=True)
    min_months = serializers.IntegerField(read_only=True)
    privileges = serializers.ListField(child=serializers.CharField(), read_only=True)
    unlocks = serializers.ListField(child=serializers.CharField(), read_only=True)
