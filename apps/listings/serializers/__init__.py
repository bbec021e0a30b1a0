"""
Listing serializers module.
"""
from .listing_serializers import ListingSerializer, ListingWriteSerializer

__all__ = [
    'ListingSerializer',
    'ListingWriteSerializer',
]
